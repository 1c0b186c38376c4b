"""Resizable Int Buffer — growable, index-addressable storage of signed integers.

Invariants:
    - Capacity starts at DEFAULT_CAPACITY (4) and never shrinks
    - Apparent length == capacity; every slot in [0, capacity) is readable, unset slots are 0
    - get() never wraps negative indices and never clamps: out of range is IndexOutOfRangeError
    - Writing at index >= capacity grows to compute_grown_capacity(index), zero-filled,
      with existing values kept at their original positions
    - A failed set() leaves storage and capacity untouched (validation happens before growth)
    - to_array() returns a copy; the storage block itself is never handed out

Design Decisions:
    - array("q") over list: one contiguous block of fixed-width slots, zero-filled by bytes()
    - Single owner, no locking: callers sharing a buffer across threads bring their own mutex
    - No __iter__/__getitem__: reads go through get() so the bounds contract always applies
"""

import logging
from array import array
from collections.abc import Iterable

from intbuffer.core.domain_types import (
    DEFAULT_CAPACITY, INT64_MAX, INT64_MIN, STORAGE_TYPECODE, BufferIndex, Capacity,
)
from intbuffer.core.errors import (
    AllocationError, IndexOutOfRangeError, InvalidIndexError, InvalidValueError,
)
from intbuffer.core.growth import compute_grown_capacity

logger = logging.getLogger(__name__)

_SLOT_BYTES = array(STORAGE_TYPECODE).itemsize


def _check_index(index: object) -> None:
    # bool is an int subclass but never a meaningful position
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndexError(index)


def _check_int(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(value, f"expected int, got {type(value).__name__}")


def _check_value(value: object) -> None:
    _check_int(value)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidValueError(value, "outside the signed 64-bit range")


def _allocate(capacity: int, current: int) -> array:
    """Zero-filled block of `capacity` slots. Allocator faults become AllocationError."""
    try:
        return array(STORAGE_TYPECODE, bytes(capacity * _SLOT_BYTES))
    except (MemoryError, OverflowError) as exc:
        raise AllocationError(capacity, current, type(exc).__name__) from exc


def _check_ceiling(max_capacity: int | None) -> None:
    if max_capacity is not None and max_capacity < DEFAULT_CAPACITY:
        raise AllocationError(
            DEFAULT_CAPACITY, 0, f"max capacity {max_capacity} is below {DEFAULT_CAPACITY}",
        )


class ResizableIntBuffer:
    """Growable buffer of signed integers addressed by zero-based index."""

    def __init__(self, max_capacity: int | None = None):
        _check_ceiling(max_capacity)
        self._max_capacity = max_capacity
        self._storage = _allocate(DEFAULT_CAPACITY, 0)

    @classmethod
    def from_values(
        cls, values: Iterable[int], max_capacity: int | None = None,
    ) -> "ResizableIntBuffer":
        """Buffer whose slots are a copy of `values`; capacity = len(values).

        Capacity may be below DEFAULT_CAPACITY, including 0; max_capacity may not.
        """
        _check_ceiling(max_capacity)
        values = list(values)
        for value in values:
            _check_value(value)
        if max_capacity is not None and len(values) > max_capacity:
            raise AllocationError(
                len(values), 0, f"exceeds max capacity {max_capacity}",
            )
        buffer = cls.__new__(cls)
        buffer._max_capacity = max_capacity
        buffer._storage = array(STORAGE_TYPECODE, values)
        return buffer

    # --- Accessors ------------------------------------------------------------

    @property
    def max_capacity(self) -> int | None:
        """Growth ceiling, or None when unbounded."""
        return self._max_capacity

    def length(self) -> Capacity:
        """Current capacity. There is no separate logical length."""
        return Capacity(len(self._storage))

    def get(self, index: BufferIndex) -> int:
        """Value at `index`. Raises IndexOutOfRangeError outside [0, capacity)."""
        _check_index(index)
        if not 0 <= index < len(self._storage):
            raise IndexOutOfRangeError(index, len(self._storage))
        return self._storage[index]

    def contains(self, value: int) -> bool:
        """Linear scan over every slot, unset zero slots included.

        An int no slot can hold is simply absent.
        """
        _check_int(value)
        if not INT64_MIN <= value <= INT64_MAX:
            return False
        return value in self._storage

    def to_array(self) -> list[int]:
        """Independent copy of all slots in index order."""
        return self._storage.tolist()

    # --- Mutation -------------------------------------------------------------

    def set(self, index: BufferIndex, value: int) -> None:
        """Store `value` at `index`, growing the storage when index >= capacity."""
        _check_index(index)
        _check_value(value)
        if index < 0:
            raise IndexOutOfRangeError(index, len(self._storage))
        if index >= len(self._storage):
            self._grow(index)
        self._storage[index] = value

    def _grow(self, index: int) -> None:
        old_capacity = len(self._storage)
        new_capacity = compute_grown_capacity(index, old_capacity, self._max_capacity)
        grown = _allocate(new_capacity, old_capacity)
        grown[:old_capacity] = self._storage
        self._storage = grown
        logger.debug(
            "Buffer grown",
            extra={
                "index": index,
                "old_capacity": old_capacity,
                "new_capacity": new_capacity,
            },
        )

    # --- Python protocol --------------------------------------------------------

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"ResizableIntBuffer(capacity={len(self._storage)})"
