"""Exceptions raised by the bookmark service layer."""


class BookmarkValidationError(Exception):
    """
    Base exception for rejected bookmark payloads.

    Raised before any persistence call is made, so a rejected payload never
    causes a partial write. Mapped to 400 by the API layer.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(BookmarkValidationError):
    """Raised when a required field is absent or empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing {field} in request body")


class InvalidUrlError(BookmarkValidationError):
    """Raised when url is not a well-formed http(s) URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("'url' must be a valid URL")


class InvalidRatingError(BookmarkValidationError):
    """Raised when rating is not an integer between 0 and 5."""

    def __init__(self, rating: object) -> None:
        self.rating = rating
        super().__init__("Rating must be a number between 0 and 5")


class EmptyUpdateError(BookmarkValidationError):
    """Raised when an update payload contains none of the updatable fields."""

    def __init__(self, fields: tuple[str, ...]) -> None:
        self.fields = fields
        super().__init__(f"Request body must contain either {', '.join(fields)}")


class InvalidFieldTypeError(BookmarkValidationError):
    """Raised when a field has the wrong JSON type (e.g. a number for title)."""

    def __init__(self, field: str, expected: str) -> None:
        self.field = field
        self.expected = expected
        super().__init__(f"'{field}' must be a {expected}")


class FieldTooLongError(BookmarkValidationError):
    """Raised when a text field exceeds its configured maximum length."""

    def __init__(self, field: str, max_length: int) -> None:
        self.field = field
        self.max_length = max_length
        super().__init__(f"'{field}' exceeds maximum length of {max_length:,} characters")


class BookmarkNotFoundError(Exception):
    """Raised when no bookmark matches the requested id. Mapped to 404."""

    message = "Bookmark doesn't exist"

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(self.message)


class StoreUnavailableError(Exception):
    """
    Raised when the database fails underneath a repository call.

    The underlying driver error is chained as __cause__ and only logged; clients
    get a generic 500.
    """
