"""FastAPI application entry point."""
import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.routers import bookmarks, health
from core.config import get_settings
from core.logging_config import configure_logging
from db.session import dispose_engine
from schemas.errors import ErrorResponse
from services.exceptions import (
    BookmarkNotFoundError,
    BookmarkValidationError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    configure_logging(get_settings())
    yield
    await dispose_engine()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        # HSTS: enforce HTTPS for 1 year, including subdomains
        response.headers["Strict-Transport-Security"] = (
            "max-age=31536000; includeSubDomains"
        )
        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        # Prevent clickjacking - API shouldn't be framed
        response.headers["X-Frame-Options"] = "DENY"
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request. Silent in the test environment."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Time the request and log method, path, status and duration."""
        if get_settings().environment == "test":
            return await call_next(request)
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.from_message(message).model_dump(),
    )


app_settings = get_settings()

app = FastAPI(
    title="Bookmarks API",
    description="A bookmark management service.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(BookmarkValidationError)
async def validation_exception_handler(
    _request: Request, exc: BookmarkValidationError,
) -> JSONResponse:
    """Rejected payloads are a 400 with the validator's message."""
    return _error_response(400, exc.message)


@app.exception_handler(BookmarkNotFoundError)
async def not_found_exception_handler(
    _request: Request, exc: BookmarkNotFoundError,
) -> JSONResponse:
    """Unknown bookmark ids are a 404 with a fixed message."""
    return _error_response(404, exc.message)


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_exception_handler(
    request: Request, exc: StoreUnavailableError,
) -> JSONResponse:
    """Database failures are logged in full but answered with a generic 500."""
    logger.error(
        "Store failure on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return _error_response(500, "Internal server error")


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """
    Malformed requests FastAPI rejects before reaching the service.

    E.g. a body that is not a JSON object, or a non-integer id. Answered with
    400 in the same error shape as the service's validation errors.
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return _error_response(400, message)


# Request logging runs innermost so its timing excludes header bookkeeping
app.add_middleware(RequestLoggingMiddleware)

# Security headers middleware (runs after CORS, adds headers to responses)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router, prefix=app_settings.api_prefix)
