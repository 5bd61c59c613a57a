import asyncio
import logging
from pathlib import Path

import aiofiles
import cloudinary
import cloudinary.uploader
from uuid_extensions import uuid7

from app.config import Settings, get_settings
from app.exceptions import UploadError

logger = logging.getLogger(__name__)


def attachment_url(image_url: str | None) -> str | None:
    """Cloudinary delivery URL that makes browsers download the image instead of showing it."""
    if not image_url or "/upload/" not in image_url:
        return image_url
    if "/upload/fl_attachment/" in image_url:
        return image_url
    return image_url.replace("/upload/", "/upload/fl_attachment/", 1)


class CloudinaryStorage:
    """
    Cloudinary image hosting.

    Images are staged on local disk, uploaded, and the staged file is
    removed whether or not the upload succeeded.
    """

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True,
        )
        self.folder = settings.cloudinary_folder
        self.staging_path = Path(settings.staging_path)

    def _ensure_staging_path(self) -> None:
        """Ensure the staging directory exists."""
        self.staging_path.mkdir(parents=True, exist_ok=True)

    def _staging_file(self) -> Path:
        return self.staging_path / f"thumbnail-{uuid7()}.png"

    async def upload(self, image_bytes: bytes) -> str:
        """Upload an image and return its public URL."""
        self._ensure_staging_path()
        staged = self._staging_file()

        try:
            async with aiofiles.open(staged, "wb") as f:
                await f.write(image_bytes)

            result = await asyncio.to_thread(
                cloudinary.uploader.upload,
                str(staged),
                folder=self.folder,
                resource_type="image",
            )
        except Exception as e:
            logger.error("Cloudinary upload failed: %s: %s", e.__class__.__name__, e)
            raise UploadError(f"Cloudinary upload failed: {e}") from e
        finally:
            staged.unlink(missing_ok=True)

        url = result.get("secure_url") or result.get("url")
        if not url:
            raise UploadError("Cloudinary response did not include an image URL")

        logger.info("Cloudinary upload successful: %s", result.get("public_id"))
        return url

    async def ensure_storage_exists(self) -> None:
        """Ensure storage is ready (create directories)."""
        self._ensure_staging_path()


# Singleton instance
storage = CloudinaryStorage()
