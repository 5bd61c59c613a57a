from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import commit
from app.exceptions import UserExistsError
from app.models import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user(db: AsyncSession, user_id: str) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == normalize_email(email)))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, *, name: str, email: str, password_hash: str) -> User:
    """
    Insert a new user.

    Raises:
        UserExistsError: the email is already registered
    """
    if await get_user_by_email(db, email) is not None:
        raise UserExistsError()

    user = User(name=name.strip(), email=normalize_email(email), password_hash=password_hash)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        # Lost a race with a concurrent registration
        await db.rollback()
        raise UserExistsError() from e

    await commit(db)
    await db.refresh(user)
    return user
