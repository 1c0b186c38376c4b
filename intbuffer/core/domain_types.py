"""Domain Types — constants and rich types for buffer indices and capacities.

Invariants:
    - DEFAULT_CAPACITY is fixed at 4 and is not configurable
    - Stored values fit a signed 64-bit slot: INT64_MIN <= value <= INT64_MAX
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - "q" typecode: array module's signed 64-bit slot, contiguous storage
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

BufferIndex = NewType("BufferIndex", int)   # 0 <= index < capacity
Capacity = NewType("Capacity", int)         # >= 0, never shrinks


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_CAPACITY: Capacity = Capacity(4)

STORAGE_TYPECODE = "q"
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class LogFormat(str, Enum):
    """Log output formats accepted by setup_logging."""
    JSON = "json"
    TEXT = "text"
