"""Logging configuration for the application."""

import logging
import sys

from quill.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Structured events go through logfire; this sets levels for the stdlib
    loggers used by uvicorn, SQLAlchemy and redis.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("redis").setLevel(logging.WARNING)

    logging.getLogger("quill").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
