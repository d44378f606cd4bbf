"""Persistence of bookmark rows."""
import logging
from typing import Protocol

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class BookmarkRepository(Protocol):
    """Storage operations on the bookmarks table, keyed by id."""

    async def list_all(self) -> list[Bookmark]:
        """Return every bookmark in insertion order (empty list when none)."""

    async def get_by_id(self, bookmark_id: int) -> Bookmark | None:
        """Return the bookmark with this id, or None if it doesn't exist."""

    async def create(self, data: BookmarkCreate) -> Bookmark:
        """Persist a new bookmark and return it with its assigned id."""

    async def update_by_id(self, bookmark_id: int, data: BookmarkUpdate) -> int:
        """Merge the fields set on data onto the row. Returns rows updated (0 or 1)."""

    async def delete_by_id(self, bookmark_id: int) -> int:
        """Delete the row. Returns rows deleted (0 or 1)."""

    async def commit(self) -> None:
        """Make the writes of this unit of work durable."""


class SqlAlchemyBookmarkRepository:
    """
    BookmarkRepository backed by an async SQLAlchemy session.

    Every write is a single statement against a single row, so concurrent
    requests rely on the database's row-level atomicity. Writes are only
    flushed until the service calls commit(), which runs before the response
    is built so a failed commit is reported to the client.

    Driver failures are re-raised as StoreUnavailableError.
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_all(self) -> list[Bookmark]:
        """Return every bookmark ordered by id."""
        try:
            result = await self._db.execute(select(Bookmark).order_by(Bookmark.id))
        except SQLAlchemyError as e:
            raise StoreUnavailableError("Failed to list bookmarks") from e
        return list(result.scalars().all())

    async def get_by_id(self, bookmark_id: int) -> Bookmark | None:
        """Get a bookmark by id. Returns None if not found."""
        try:
            result = await self._db.execute(
                select(Bookmark).where(Bookmark.id == bookmark_id),
            )
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to load bookmark {bookmark_id}") from e
        return result.scalar_one_or_none()

    async def create(self, data: BookmarkCreate) -> Bookmark:
        """Insert a bookmark; the database assigns the id."""
        bookmark = Bookmark(
            title=data.title,
            url=data.url,
            description=data.description,
            rating=data.rating,
        )
        try:
            self._db.add(bookmark)
            await self._db.flush()
            await self._db.refresh(bookmark)
        except SQLAlchemyError as e:
            raise StoreUnavailableError("Failed to create bookmark") from e
        logger.debug("Created bookmark %s", bookmark.id)
        return bookmark

    async def update_by_id(self, bookmark_id: int, data: BookmarkUpdate) -> int:
        """
        Update only the columns set on data.

        Omitted fields are not part of the UPDATE statement, so they keep their
        stored values byte for byte.
        """
        values = data.model_dump(exclude_unset=True)
        if not values:
            return 0
        try:
            result = await self._db.execute(
                update(Bookmark)
                .where(Bookmark.id == bookmark_id)
                .values(**values),
            )
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to update bookmark {bookmark_id}") from e
        return result.rowcount

    async def delete_by_id(self, bookmark_id: int) -> int:
        """Delete a bookmark by id."""
        try:
            result = await self._db.execute(
                delete(Bookmark).where(Bookmark.id == bookmark_id),
            )
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to delete bookmark {bookmark_id}") from e
        return result.rowcount

    async def commit(self) -> None:
        """Commit the session's transaction. The session dependency rolls back on failure."""
        try:
            await self._db.commit()
        except SQLAlchemyError as e:
            raise StoreUnavailableError("Failed to commit bookmark changes") from e
