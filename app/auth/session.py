from collections.abc import MutableMapping

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import user as crud_user
from app.database import get_db
from app.exceptions import InvalidUserError, NotAuthenticatedError
from app.models import User


class SessionStore:
    """Login state kept in the signed session cookie."""

    def __init__(self, session: MutableMapping):
        self._session = session

    @property
    def user_id(self) -> str | None:
        if not self._session.get("is_logged_in"):
            return None
        return self._session.get("user_id")

    @property
    def is_logged_in(self) -> bool:
        return self.user_id is not None

    def login(self, user_id: str) -> None:
        self._session["is_logged_in"] = True
        self._session["user_id"] = user_id

    def logout(self) -> None:
        self._session.clear()


def get_session_store(request: Request) -> SessionStore:
    return SessionStore(request.session)


def require_user_id(session: SessionStore = Depends(get_session_store)) -> str:
    """Id of the logged-in user, without loading the user record."""
    if session.user_id is None:
        raise NotAuthenticatedError()
    return session.user_id


async def get_current_user(
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
) -> User:
    user = await crud_user.get_user(db, user_id)
    if user is None:
        raise InvalidUserError()
    return user
