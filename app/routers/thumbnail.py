import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.session import require_user_id
from app.crud import thumbnail as crud_thumbnail
from app.database import get_db
from app.exceptions import NotFoundError
from app.schemas import (
    GenerateThumbnailRequest,
    GenerateThumbnailResponse,
    MessageResponse,
    ThumbnailInfo,
)
from app.services.thumbnails import ThumbnailGenerator, get_thumbnail_generator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/thumbnail", tags=["thumbnail"])


@router.post("/generate", response_model=GenerateThumbnailResponse)
async def generate_thumbnail(
    request: GenerateThumbnailRequest,
    user_id: str = Depends(require_user_id),
    generator: ThumbnailGenerator = Depends(get_thumbnail_generator),
    db: AsyncSession = Depends(get_db),
):
    """
    Generate a thumbnail for the logged-in user.

    The system will:
    1. Build a prompt from the style, color scheme, title and extra details
    2. Store a thumbnail record marked as generating
    3. Generate the image with Gemini
    4. Upload it to Cloudinary and attach the URL to the record

    Example request:
    - title: "I tried 5 productivity apps for a week"
    - style: "Bold & Graphic", aspect_ratio: "16:9", color_scheme: "neon"
    """
    thumbnail = await generator.generate(
        db,
        user_id,
        title=request.title,
        style=request.style,
        aspect_ratio=request.aspect_ratio,
        color_scheme=request.color_scheme,
        user_prompt=request.prompt,
        text_overlay=request.text_overlay,
    )

    return GenerateThumbnailResponse(thumbnail=ThumbnailInfo.model_validate(thumbnail))


@router.delete("/delete/{thumbnail_id}", response_model=MessageResponse)
async def delete_thumbnail(
    thumbnail_id: str,
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete one of the user's thumbnails."""
    deleted = await crud_thumbnail.delete_thumbnail_for_owner(db, thumbnail_id, user_id)
    if not deleted:
        raise NotFoundError("Thumbnail not found")

    logger.info("User %s deleted thumbnail %s", user_id, thumbnail_id)
    return MessageResponse(message="Thumbnail deleted successfully")
