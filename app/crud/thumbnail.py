from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import commit
from app.exceptions import NotFoundError
from app.models import Thumbnail


async def create_thumbnail(
    db: AsyncSession,
    *,
    user_id: str,
    title: str,
    style: str,
    aspect_ratio: str,
    prompt_used: str,
    color_scheme: str | None = None,
    user_prompt: str | None = None,
    text_overlay: bool = False,
) -> Thumbnail:
    """Insert a thumbnail in the generating state."""
    thumbnail = Thumbnail(
        user_id=user_id,
        title=title,
        style=style,
        aspect_ratio=aspect_ratio,
        color_scheme=color_scheme,
        user_prompt=user_prompt,
        text_overlay=text_overlay,
        prompt_used=prompt_used,
        image_url=None,
        is_generating=True,
    )
    db.add(thumbnail)
    await commit(db)
    await db.refresh(thumbnail)
    return thumbnail


async def get_thumbnail(db: AsyncSession, thumbnail_id: str) -> Thumbnail | None:
    result = await db.execute(select(Thumbnail).where(Thumbnail.id == thumbnail_id))
    return result.scalar_one_or_none()


async def attach_result(db: AsyncSession, thumbnail_id: str, image_url: str) -> Thumbnail:
    """Store the hosted image URL and finish generation."""
    thumbnail = await get_thumbnail(db, thumbnail_id)
    if thumbnail is None:
        raise NotFoundError("Thumbnail not found")

    thumbnail.image_url = image_url
    thumbnail.is_generating = False
    await commit(db)
    await db.refresh(thumbnail)
    return thumbnail


async def mark_abandoned(db: AsyncSession, thumbnail_id: str) -> Thumbnail | None:
    """Stop reporting a failed thumbnail as generating. The image URL stays empty."""
    thumbnail = await get_thumbnail(db, thumbnail_id)
    if thumbnail is None:
        return None

    thumbnail.is_generating = False
    await commit(db)
    await db.refresh(thumbnail)
    return thumbnail


async def list_thumbnails_for_owner(db: AsyncSession, user_id: str) -> list[Thumbnail]:
    """All thumbnails of a user, newest first."""
    result = await db.execute(
        select(Thumbnail)
        .where(Thumbnail.user_id == user_id)
        .order_by(Thumbnail.created_at.desc(), Thumbnail.id.desc())
    )
    return list(result.scalars().all())


async def get_thumbnail_for_owner(db: AsyncSession, thumbnail_id: str, user_id: str) -> Thumbnail | None:
    result = await db.execute(
        select(Thumbnail).where(Thumbnail.id == thumbnail_id, Thumbnail.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def delete_thumbnail_for_owner(db: AsyncSession, thumbnail_id: str, user_id: str) -> bool:
    """Delete a thumbnail only if it belongs to the user. Returns whether a row was removed."""
    result = await db.execute(
        delete(Thumbnail).where(Thumbnail.id == thumbnail_id, Thumbnail.user_id == user_id)
    )
    await commit(db)
    return result.rowcount > 0
