from datetime import datetime
from sqlalchemy import String, DateTime, Text, ForeignKey, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid_extensions import uuid7

from app.database import Base


class Thumbnail(Base):
    __tablename__ = "thumbnails"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid7())
    )

    # Foreign key to user
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Generation inputs
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    style: Mapped[str] = mapped_column(String(50), nullable=False)
    aspect_ratio: Mapped[str] = mapped_column(String(10), nullable=False, default="16:9")
    color_scheme: Mapped[str | None] = mapped_column(String(50), nullable=True)
    user_prompt: Mapped[str | None] = mapped_column(Text, nullable=True)
    text_overlay: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # The full prompt sent to the image model
    prompt_used: Mapped[str] = mapped_column(Text, nullable=False)

    # Hosted image, set once generation completes
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_generating: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationship back to user
    user: Mapped["User"] = relationship("User", back_populates="thumbnails")

    def __repr__(self) -> str:
        return f"<Thumbnail(id={self.id}, user_id={self.user_id}, is_generating={self.is_generating})>"
