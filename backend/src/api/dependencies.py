"""FastAPI dependencies for injection."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_async_session
from repositories.bookmark_repository import BookmarkRepository, SqlAlchemyBookmarkRepository
from services.bookmark_service import BookmarkService


def get_bookmark_repository(
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkRepository:
    """Repository bound to the request's session."""
    return SqlAlchemyBookmarkRepository(db)


def get_bookmark_service(
    repository: BookmarkRepository = Depends(get_bookmark_repository),
) -> BookmarkService:
    """Bookmark service for the current request."""
    return BookmarkService(repository)


__all__ = [
    "get_async_session",
    "get_bookmark_repository",
    "get_bookmark_service",
]
