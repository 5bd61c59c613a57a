from app.schemas.common import MessageResponse
from app.schemas.user import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    VerifyResponse,
)
from app.schemas.thumbnail import (
    ThumbnailStyle,
    ColorScheme,
    AspectRatio,
    GenerateThumbnailRequest,
    GenerateThumbnailResponse,
    ThumbnailInfo,
    ThumbnailListResponse,
    ThumbnailDetailResponse,
)

__all__ = [
    "MessageResponse",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "VerifyResponse",
    "ThumbnailStyle",
    "ColorScheme",
    "AspectRatio",
    "GenerateThumbnailRequest",
    "GenerateThumbnailResponse",
    "ThumbnailInfo",
    "ThumbnailListResponse",
    "ThumbnailDetailResponse",
]
