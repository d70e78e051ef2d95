"""
Logging setup for the command-line tools.

Library modules only create loggers; handlers are attached here.
"""

import logging

from .config import Settings, get_settings

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the level and format from settings to the root logger."""
    if settings is None:
        settings = get_settings()

    level = LOG_LEVELS.get(settings.logging.level.upper())
    if level is None:
        raise ValueError(f"Unknown log level: {settings.logging.level}")

    logging.basicConfig(level=level, format=settings.logging.format, force=True)
