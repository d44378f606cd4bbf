"""Logging setup for the API process."""
import logging

from core.config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger from settings.

    Uses force=True so that settings win over any handler installed earlier
    (e.g. by the ASGI server).
    """
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
        force=True,
    )
