"""Buffer Factory — builds and restores buffers with the configured allocation ceiling.

Invariants:
    - Settings are read here, never inside core/
    - Failures are logged at WARNING and re-raised unchanged

Design Decisions:
    - Optional settings argument: tests inject Settings, callers default to get_settings()
"""

import logging

from intbuffer.config import Settings, get_settings
from intbuffer.core.buffer_snapshot import buffer_from_snapshot
from intbuffer.core.errors import IntBufferError
from intbuffer.core.resizable_buffer import ResizableIntBuffer

logger = logging.getLogger(__name__)


def create_buffer(settings: Settings | None = None) -> ResizableIntBuffer:
    """New default-capacity buffer bounded by settings.max_capacity."""
    settings = settings or get_settings()
    buffer = ResizableIntBuffer(max_capacity=settings.max_capacity)
    logger.debug("Buffer created", extra={"capacity": buffer.length()})
    return buffer


def restore_buffer(
    data: dict, settings: Settings | None = None,
) -> ResizableIntBuffer:
    """Buffer rebuilt from a snapshot dict, bounded by settings.max_capacity."""
    settings = settings or get_settings()
    try:
        buffer = buffer_from_snapshot(data, max_capacity=settings.max_capacity)
    except IntBufferError as exc:
        logger.warning(
            f"Buffer restore failed: {exc.message}",
            extra={"error_code": exc.code},
        )
        raise
    logger.debug("Buffer restored", extra={"capacity": buffer.length()})
    return buffer
