"""Process-wide logging setup driven by settings."""

import logging

from .config import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once from ``settings.log_level``.

    Args:
        level: Optional level name overriding the configured one.

    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    _LOGGING_CONFIGURED = True
