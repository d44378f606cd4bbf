"""
Validation of inbound bookmark payloads.

Create and update share the per-field checks below and differ only in which
fields must be present: create requires title and url, update requires at least
one updatable field. Each check either returns the normalized value or raises a
BookmarkValidationError subclass.
"""
from typing import Any

from pydantic import HttpUrl, TypeAdapter, ValidationError

from core.config import get_settings
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import (
    EmptyUpdateError,
    FieldTooLongError,
    InvalidFieldTypeError,
    InvalidRatingError,
    InvalidUrlError,
    MissingFieldError,
)

UPDATABLE_FIELDS = ("title", "url", "description", "rating")

MIN_RATING = 0
MAX_RATING = 5

_http_url_adapter = TypeAdapter(HttpUrl)


def _check_required_text(field: str, value: Any, max_length: int | None = None) -> str:
    if value is None:
        raise MissingFieldError(field)
    if not isinstance(value, str):
        raise InvalidFieldTypeError(field, "string")
    if not value.strip():
        raise MissingFieldError(field)
    if max_length is not None and len(value) > max_length:
        raise FieldTooLongError(field, max_length)
    return value


def check_title(value: Any) -> str:
    """Title must be a non-blank string within the configured length."""
    return _check_required_text("title", value, get_settings().max_title_length)


def check_url(value: Any) -> str:
    """
    URL must be a well-formed web URI: http or https scheme plus a host.

    Only the syntax is checked (no network request). The submitted string is
    returned as-is; HttpUrl's normalized form (e.g. trailing slash) is not stored.
    """
    url = _check_required_text("url", value)
    try:
        _http_url_adapter.validate_python(url)
    except ValidationError as e:
        raise InvalidUrlError(url) from e
    return url


def check_description(value: Any) -> str | None:
    """Description is optional; None and "" both mean absent."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise InvalidFieldTypeError("description", "string")
    max_length = get_settings().max_description_length
    if len(value) > max_length:
        raise FieldTooLongError("description", max_length)
    return value


def check_rating(value: Any) -> int | None:
    """Rating is optional; when present it must be an integer from 0 to 5."""
    if value is None:
        return None
    # bool is a subclass of int, and 3.0 / "3" are not integers
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRatingError(value)
    if not MIN_RATING <= value <= MAX_RATING:
        raise InvalidRatingError(value)
    return value


FIELD_CHECKS = {
    "title": check_title,
    "url": check_url,
    "description": check_description,
    "rating": check_rating,
}


def validate_create(payload: dict[str, Any]) -> BookmarkCreate:
    """
    Validate a create payload.

    Args:
        payload: Parsed JSON request body. Unknown keys are ignored.

    Returns:
        BookmarkCreate with description/rating set to None when absent.

    Raises:
        MissingFieldError: title or url absent/empty (title is checked first).
        InvalidUrlError: url is not a well-formed http(s) URL.
        InvalidRatingError: rating is not an integer from 0 to 5.
        InvalidFieldTypeError, FieldTooLongError: wrong type or too long.
    """
    return BookmarkCreate(
        title=check_title(payload.get("title")),
        url=check_url(payload.get("url")),
        description=check_description(payload.get("description")),
        rating=check_rating(payload.get("rating")),
    )


def validate_update(payload: dict[str, Any]) -> BookmarkUpdate:
    """
    Validate a partial update payload.

    Only fields present in the payload are checked and returned; absent fields
    are neither validated nor defaulted, so they stay untouched in storage.

    Raises:
        EmptyUpdateError: none of title, url, description, rating is present.
        Otherwise the same errors as validate_create, for the present fields.
    """
    present = [field for field in UPDATABLE_FIELDS if field in payload]
    if not present:
        raise EmptyUpdateError(UPDATABLE_FIELDS)
    return BookmarkUpdate(**{field: FIELD_CHECKS[field](payload[field]) for field in present})
