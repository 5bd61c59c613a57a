from app.models.user import User
from app.models.thumbnail import Thumbnail

__all__ = ["User", "Thumbnail"]
