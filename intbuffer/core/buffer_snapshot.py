"""Buffer Snapshot — serialization / deserialization for ResizableIntBuffer.

Invariants:
    - to_snapshot produces a JSON-safe dict: {"capacity": int, "values": list[int]}
    - Snapshot values are a copy; mutating them never reaches the buffer
    - from_snapshot restores capacity exactly, including capacities below the default
    - Invalid payloads raise InvalidSnapshotError, chained from pydantic's ValidationError

Design Decisions:
    - Extracted from resizable_buffer.py: the buffer stays free of schema concerns
    - Validation delegated to schemas.buffer.BufferSnapshot
"""

from pydantic import ValidationError

from intbuffer.core.errors import InvalidSnapshotError
from intbuffer.core.resizable_buffer import ResizableIntBuffer
from intbuffer.schemas.buffer import BufferSnapshot


def buffer_to_snapshot(buffer: ResizableIntBuffer) -> dict:
    """Serialize a buffer to a JSON-safe dict. Pure, no IO."""
    values = buffer.to_array()
    return {"capacity": len(values), "values": values}


def buffer_from_snapshot(
    data: dict, max_capacity: int | None = None,
) -> ResizableIntBuffer:
    """Reconstruct a buffer from a snapshot dict. Pure, no IO."""
    try:
        snapshot = BufferSnapshot.model_validate(data)
    except ValidationError as exc:
        raise InvalidSnapshotError(
            "; ".join(err["msg"] for err in exc.errors()),
        ) from exc
    return ResizableIntBuffer.from_values(snapshot.values, max_capacity=max_capacity)
