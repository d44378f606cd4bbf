"""Bookmark model for storing bookmarks."""
from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin


class Bookmark(Base, TimestampMixin):
    """
    Bookmark model - one row per saved URL.

    Text columns hold the raw submitted values. Sanitizing happens when a bookmark
    is read back out (see services.sanitizer), never on write.
    """

    __tablename__ = "bookmarks"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_bookmarks_rating_range"),
    )

    # SERIAL: assigned by the store, never reused after a delete
    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
