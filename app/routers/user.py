from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.session import require_user_id
from app.crud import thumbnail as crud_thumbnail
from app.database import get_db
from app.schemas import ThumbnailDetailResponse, ThumbnailInfo, ThumbnailListResponse

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/thumbnails", response_model=ThumbnailListResponse)
async def get_user_thumbnails(
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get the user's thumbnails, newest first."""
    thumbnails = await crud_thumbnail.list_thumbnails_for_owner(db, user_id)
    return ThumbnailListResponse(
        thumbnails=[ThumbnailInfo.model_validate(thumbnail) for thumbnail in thumbnails]
    )


@router.get("/thumbnail/{thumbnail_id}", response_model=ThumbnailDetailResponse)
async def get_thumbnail_by_id(
    thumbnail_id: str,
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get a single thumbnail. ``thumbnail`` is null when it is missing or not the user's."""
    thumbnail = await crud_thumbnail.get_thumbnail_for_owner(db, thumbnail_id, user_id)
    if thumbnail is None:
        return ThumbnailDetailResponse(thumbnail=None)
    return ThumbnailDetailResponse(thumbnail=ThumbnailInfo.model_validate(thumbnail))
