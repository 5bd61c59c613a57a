from pydantic import BaseModel, Field, computed_field, field_validator
from datetime import datetime
from enum import Enum

from app.services.storage import attachment_url


class ThumbnailStyle(str, Enum):
    BOLD_GRAPHIC = "Bold & Graphic"
    TECH_FUTURISTIC = "Tech/Futuristic"
    MINIMALIST = "Minimalist"
    PHOTOREALISTIC = "Photorealistic"
    ILLUSTRATED = "Illustrated"


class ColorScheme(str, Enum):
    VIBRANT = "vibrant"
    SUNSET = "sunset"
    FOREST = "forest"
    NEON = "neon"
    PURPLE = "purple"
    MONOCHROME = "monochrome"
    OCEAN = "ocean"
    PASTEL = "pastel"


class AspectRatio(str, Enum):
    LANDSCAPE_16_9 = "16:9"
    SQUARE = "1:1"
    PORTRAIT_9_16 = "9:16"


class GenerateThumbnailRequest(BaseModel):
    """Request to generate a thumbnail for the logged-in user."""
    title: str = Field(..., min_length=1, max_length=255, description="Video title")
    prompt: str | None = Field(
        default=None,
        max_length=1000,
        description="Optional extra details for the image (e.g., 'a shocked face next to a laptop')",
    )
    style: ThumbnailStyle = Field(..., description="Visual style preset")
    aspect_ratio: AspectRatio = Field(
        default=AspectRatio.LANDSCAPE_16_9,
        description="Aspect ratio of the generated thumbnail",
    )
    color_scheme: ColorScheme | None = Field(default=None, description="Color palette preset")
    text_overlay: bool = Field(default=False, description="Whether the thumbnail will carry a text overlay")

    @field_validator("prompt", "color_scheme", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ThumbnailInfo(BaseModel):
    """A stored thumbnail, possibly still generating."""
    id: str
    user_id: str
    title: str
    style: str
    aspect_ratio: str
    color_scheme: str | None = None
    user_prompt: str | None = None
    text_overlay: bool = False
    prompt_used: str
    image_url: str | None = None
    is_generating: bool
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def download_url(self) -> str | None:
        return attachment_url(self.image_url)

    class Config:
        from_attributes = True


class GenerateThumbnailResponse(BaseModel):
    message: str = "Thumbnail Generated"
    thumbnail: ThumbnailInfo


class ThumbnailListResponse(BaseModel):
    thumbnails: list[ThumbnailInfo]


class ThumbnailDetailResponse(BaseModel):
    thumbnail: ThumbnailInfo | None = None
