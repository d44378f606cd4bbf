"""Service layer for bookmark CRUD operations."""
import logging
from typing import Any

from models.bookmark import Bookmark
from repositories.bookmark_repository import BookmarkRepository
from schemas.bookmark import BookmarkResponse
from services.exceptions import BookmarkNotFoundError, BookmarkValidationError
from services.sanitizer import sanitize
from services.validator import validate_create, validate_update

logger = logging.getLogger(__name__)


def to_sanitized_response(bookmark: Bookmark) -> BookmarkResponse:
    """
    Build the response for a stored bookmark with title and description sanitized.

    Works on a copy so that the ORM instance (and therefore the stored row)
    keeps the raw text.
    """
    response = BookmarkResponse.model_validate(bookmark)
    return response.model_copy(
        update={
            "title": sanitize(response.title),
            "description": sanitize(response.description),
        },
    )


class BookmarkService:
    """
    Bookmark operations exposed to the API layer.

    Validates payloads before touching the repository, and sanitizes every
    bookmark it hands back. Repository calls are awaited one at a time, and
    every write is committed before the method returns.
    """

    def __init__(self, repository: BookmarkRepository) -> None:
        self.repository = repository

    async def list_bookmarks(self) -> list[BookmarkResponse]:
        """Return all bookmarks, sanitized."""
        bookmarks = await self.repository.list_all()
        return [to_sanitized_response(b) for b in bookmarks]

    async def get_bookmark(self, bookmark_id: int) -> BookmarkResponse:
        """Return one bookmark, sanitized. Raises BookmarkNotFoundError."""
        bookmark = await self.repository.get_by_id(bookmark_id)
        if bookmark is None:
            logger.warning("Bookmark with id %s not found", bookmark_id)
            raise BookmarkNotFoundError(bookmark_id)
        return to_sanitized_response(bookmark)

    async def add_bookmark(self, payload: dict[str, Any]) -> BookmarkResponse:
        """
        Validate and store a new bookmark.

        Validation errors propagate unchanged and nothing is persisted.
        Returns the stored bookmark (with its new id), sanitized.
        """
        try:
            data = validate_create(payload)
        except BookmarkValidationError as e:
            logger.warning("Rejected bookmark create: %s", e.message)
            raise
        bookmark = await self.repository.create(data)
        await self.repository.commit()
        logger.info("Bookmark with id %s created", bookmark.id)
        return to_sanitized_response(bookmark)

    async def patch_bookmark(self, bookmark_id: int, payload: dict[str, Any]) -> None:
        """
        Merge the supplied fields onto an existing bookmark.

        Existence is checked first, so an unknown id is a 404 even when the
        payload is also invalid. Fields not in the payload are left untouched.
        """
        if await self.repository.get_by_id(bookmark_id) is None:
            logger.warning("Bookmark with id %s not found", bookmark_id)
            raise BookmarkNotFoundError(bookmark_id)
        try:
            data = validate_update(payload)
        except BookmarkValidationError as e:
            logger.warning("Rejected update of bookmark %s: %s", bookmark_id, e.message)
            raise
        # 0 rows means a concurrent delete won the race
        if await self.repository.update_by_id(bookmark_id, data) == 0:
            raise BookmarkNotFoundError(bookmark_id)
        await self.repository.commit()
        logger.info("Bookmark with id %s updated", bookmark_id)

    async def remove_bookmark(self, bookmark_id: int) -> None:
        """Delete a bookmark. Raises BookmarkNotFoundError."""
        if await self.repository.get_by_id(bookmark_id) is None:
            logger.warning("Bookmark with id %s not found", bookmark_id)
            raise BookmarkNotFoundError(bookmark_id)
        if await self.repository.delete_by_id(bookmark_id) == 0:
            raise BookmarkNotFoundError(bookmark_id)
        await self.repository.commit()
        logger.info("Bookmark with id %s deleted", bookmark_id)
