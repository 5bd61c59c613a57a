from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from app.config import get_settings

settings = get_settings()

engine_options = {"echo": settings.database_echo}
if settings.database_url.startswith("sqlite"):
    # aiosqlite connections are bound to the loop that opened them
    engine_options["poolclass"] = NullPool

engine = create_async_engine(settings.database_url, **engine_options)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db():
    """Yield a database session for the duration of a request."""
    async with SessionLocal() as session:
        yield session
