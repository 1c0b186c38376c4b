"""Logging Setup — applies the configured log level and format to the root logger.

Invariants:
    - Settings.log_level and Settings.log_format are read here and nowhere else
    - Called once by the embedding application at startup, never on import

Design Decisions:
    - Mirrors an app lifespan hook: the package is a library, so the caller owns startup
"""

import logging

from intbuffer.config import Settings, get_settings
from intbuffer.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Install the root handler described by settings. Returns the handler."""
    settings = settings or get_settings()
    handler = setup_logging(settings.log_level, settings.log_format.value)
    logger.debug(
        f"Logging configured ({settings.log_level}, {settings.log_format.value})",
    )
    return handler
