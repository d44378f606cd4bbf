"""Pydantic schemas for bookmark endpoints."""
from pydantic import BaseModel, ConfigDict


class BookmarkCreate(BaseModel):
    """
    Normalized payload for creating a bookmark.

    Built by services.validator.validate_create; absent description and rating
    are None, never "" or 0.
    """

    title: str
    url: str
    description: str | None = None
    rating: int | None = None


class BookmarkUpdate(BaseModel):
    """
    Partial payload for updating a bookmark.

    Only the fields the caller sent are set; use model_dump(exclude_unset=True)
    to get the columns to change. An explicit None clears description or rating.
    """

    title: str | None = None
    url: str | None = None
    description: str | None = None
    rating: int | None = None


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses. Absent description/rating serialize as null."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    description: str | None
    rating: int | None
