from fastapi import status


class AppError(Exception):
    """Base error rendered to clients as ``{"message": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidStyleError(ValidationError):
    default_message = "Unknown thumbnail style"


class InvalidColorSchemeError(ValidationError):
    default_message = "Unknown color scheme"


class UserExistsError(ValidationError):
    default_message = "User already exists"


class AuthError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Authentication failed"


class InvalidCredentialsError(AuthError):
    default_message = "Invalid email or password"


class InvalidUserError(AuthError):
    default_message = "Invalid user"


class NotAuthenticatedError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized, please login"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UpstreamGenerationError(AppError):
    default_message = "Image generation failed"


class GenerationFailedError(UpstreamGenerationError):
    """The image service answered without a usable image."""


class UploadError(AppError):
    default_message = "Image upload failed"


class PersistenceError(AppError):
    default_message = "Database error"
