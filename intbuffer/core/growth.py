"""Growth Policy — new capacity for a write past the end of the buffer.

Invariants:
    - For index >= 1 the new capacity is exactly index * 2 (tied to the
      triggering index, not to the current capacity)
    - Index 0 on an empty buffer grows to 1, never to a zero-slot block
    - Result is always > index, so the triggering write fits
    - With a ceiling, the result never exceeds it; index >= ceiling is an AllocationError

Design Decisions:
    - Pure function, not a method on the buffer: testable without storage
    - Ceiling clamps the jump instead of rejecting it while the index still fits
"""

from intbuffer.core.domain_types import BufferIndex, Capacity
from intbuffer.core.errors import AllocationError, IndexOutOfRangeError


def compute_grown_capacity(
    index: BufferIndex, capacity: int, ceiling: int | None = None,
) -> Capacity:
    """Capacity to allocate so that `index` becomes writable. Pure, no IO."""
    if index < 0:
        raise IndexOutOfRangeError(index, capacity)
    target = max(index * 2, index + 1)
    if ceiling is None:
        return Capacity(target)
    if index >= ceiling:
        raise AllocationError(
            target, capacity, f"index {index} exceeds max capacity {ceiling}",
        )
    return Capacity(min(target, ceiling))
