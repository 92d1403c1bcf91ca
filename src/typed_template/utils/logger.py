"""Logging configuration."""

import sys

from loguru import logger

from typed_template.config import Settings, get_settings


def setup_logger(settings: Settings | None = None) -> None:
    """Configure library logger."""
    settings = settings or get_settings()

    logger.enable("typed_template")

    # Remove default handler
    logger.remove()

    # Add console handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=settings.log_level,
    )

    if settings.log_file is None:
        return

    # Add file handler
    logger.add(
        settings.log_file,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        level=settings.log_level,
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )
