import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import PersistenceError

logger = logging.getLogger(__name__)


async def commit(db: AsyncSession) -> None:
    """Commit the session, rolling back and raising PersistenceError on failure."""
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Database commit failed: %s", e)
        raise PersistenceError() from e
