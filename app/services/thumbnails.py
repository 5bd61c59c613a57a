import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import thumbnail as crud_thumbnail
from app.models import Thumbnail
from app.schemas.thumbnail import AspectRatio, ColorScheme, ThumbnailStyle
from app.services.imagen import GeminiImageService, imagen_service
from app.services.prompt_builder import build_prompt, resolve_aspect_ratio, resolve_color_scheme, resolve_style
from app.services.storage import CloudinaryStorage, storage

logger = logging.getLogger(__name__)


class ThumbnailGenerator:
    """
    Runs one thumbnail generation from request to stored result.

    A record is created in the generating state before the image model is
    called, then finished with the hosted image URL. If generation or upload
    fails the record is marked abandoned and the error is re-raised.
    """

    def __init__(self, image_service: GeminiImageService, image_storage: CloudinaryStorage):
        self.image_service = image_service
        self.storage = image_storage

    async def generate(
        self,
        db: AsyncSession,
        user_id: str,
        *,
        title: str,
        style: ThumbnailStyle | str,
        aspect_ratio: AspectRatio | str = AspectRatio.LANDSCAPE_16_9,
        color_scheme: ColorScheme | str | None = None,
        user_prompt: str | None = None,
        text_overlay: bool = False,
    ) -> Thumbnail:
        # Invalid presets are rejected here, before anything is stored or sent
        prompt = build_prompt(title, style, aspect_ratio, color_scheme, user_prompt)

        thumbnail = await crud_thumbnail.create_thumbnail(
            db,
            user_id=user_id,
            title=title,
            style=resolve_style(style).value,
            aspect_ratio=resolve_aspect_ratio(aspect_ratio).value,
            color_scheme=resolve_color_scheme(color_scheme).value if color_scheme else None,
            user_prompt=user_prompt,
            text_overlay=text_overlay,
            prompt_used=prompt,
        )
        thumbnail_id = thumbnail.id
        logger.info("Generating thumbnail %s for user %s", thumbnail_id, user_id)

        try:
            image_bytes = await self.image_service.generate_image(prompt, thumbnail.aspect_ratio)
            image_url = await self.storage.upload(image_bytes)
            thumbnail = await crud_thumbnail.attach_result(db, thumbnail_id, image_url)
        except Exception:
            logger.exception("Thumbnail generation failed for %s", thumbnail_id)
            await self._abandon(db, thumbnail_id)
            raise

        logger.info("Thumbnail %s ready: %s", thumbnail_id, thumbnail.image_url)
        return thumbnail

    async def _abandon(self, db: AsyncSession, thumbnail_id: str) -> None:
        try:
            await crud_thumbnail.mark_abandoned(db, thumbnail_id)
        except Exception:
            # The generation error is the one the caller needs to see
            logger.exception("Could not mark thumbnail %s as abandoned", thumbnail_id)


thumbnail_generator = ThumbnailGenerator(imagen_service, storage)


def get_thumbnail_generator() -> ThumbnailGenerator:
    return thumbnail_generator
