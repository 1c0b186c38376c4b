"""Error Hierarchy — typed, categorized exceptions for every buffer failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error also subclasses the matching builtin (IndexError, TypeError,
      ValueError, MemoryError) so plain `except IndexError` keeps working
    - A failed operation leaves the buffer unchanged; errors are never retried or clamped

Design Decisions:
    - Single hierarchy with IntBufferError base: callers catch one type for all faults
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BOUNDS = "bounds"
    RESOURCE = "resource"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    index: int | None = None
    capacity: int | None = None
    value: Any = None
    debug_info: dict[str, Any] | None = None


class IntBufferError(Exception):
    """Base exception for all buffer errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a structured, JSON-safe error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "index": self.context.index,
                    "capacity": self.context.capacity,
                    "value": repr(self.context.value)
                    if self.context.value is not None else None,
                },
            }
        }


# ─── Access Errors ──────────────────────────────────────────────

class IndexOutOfRangeError(IntBufferError, IndexError):
    """Index outside [0, capacity) on read, or negative on write."""
    def __init__(self, index: int, capacity: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.index = index
        ctx.capacity = capacity
        super().__init__(
            f"Index {index} out of range for capacity {capacity}",
            "INDEX_OUT_OF_RANGE", ErrorCategory.BOUNDS,
            ErrorSeverity.ERROR, ctx,
        )
        self.index = index
        self.capacity = capacity


class InvalidIndexError(IntBufferError, TypeError):
    """Index is not an int."""
    def __init__(self, index: Any, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.value = index
        super().__init__(
            f"Buffer indices must be int, not {type(index).__name__}",
            "INVALID_INDEX", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )


class InvalidValueError(IntBufferError, ValueError):
    """Value is not an int or does not fit a signed 64-bit slot."""
    def __init__(self, value: Any, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.value = value
        super().__init__(
            f"Invalid buffer value {value!r}: {reason}",
            "INVALID_VALUE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.reason = reason


class InvalidSnapshotError(IntBufferError, ValueError):
    """Snapshot payload failed validation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid buffer snapshot: {message}",
            "INVALID_SNAPSHOT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


# ─── Resource Errors ────────────────────────────────────────────

class AllocationError(IntBufferError, MemoryError):
    """Growth could not obtain a block of the requested capacity."""
    def __init__(
        self,
        requested: int,
        capacity: int,
        reason: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.capacity = capacity
        ctx.debug_info = {"requested": requested}
        super().__init__(
            f"Cannot allocate {requested} slots (current capacity {capacity}): {reason}",
            "ALLOCATION_FAILED", ErrorCategory.RESOURCE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.requested = requested
