"""Bookmark CRUD endpoints."""
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from api.dependencies import get_bookmark_service
from schemas.bookmark import BookmarkResponse
from schemas.errors import ErrorResponse
from services.bookmark_service import BookmarkService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Bookmark doesn't exist"},
}
BAD_REQUEST_RESPONSE: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid request body"},
}


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    service: BookmarkService = Depends(get_bookmark_service),
) -> list[BookmarkResponse]:
    """List all bookmarks."""
    return await service.list_bookmarks()


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses=BAD_REQUEST_RESPONSE,
)
async def create_bookmark(
    request: Request,
    response: Response,
    payload: dict[str, Any] | None = Body(default=None),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    """
    Create a new bookmark.

    Requires title and url; description and rating are optional.
    The Location header points at the new resource.
    """
    bookmark = await service.add_bookmark(payload or {})
    response.headers["Location"] = str(
        request.url_for("get_bookmark", bookmark_id=bookmark.id),
    )
    return bookmark


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def get_bookmark(
    bookmark_id: int,
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    return await service.get_bookmark(bookmark_id)


@router.patch(
    "/{bookmark_id}",
    status_code=204,
    responses={**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE},
)
async def update_bookmark(
    bookmark_id: int,
    payload: dict[str, Any] | None = Body(default=None),
    service: BookmarkService = Depends(get_bookmark_service),
) -> Response:
    """Update any non-empty subset of title, url, description, rating."""
    await service.patch_bookmark(bookmark_id, payload or {})
    return Response(status_code=204)


@router.delete("/{bookmark_id}", status_code=204, responses=NOT_FOUND_RESPONSE)
async def delete_bookmark(
    bookmark_id: int,
    service: BookmarkService = Depends(get_bookmark_service),
) -> Response:
    """Delete a bookmark."""
    await service.remove_bookmark(bookmark_id)
    return Response(status_code=204)
