"""Buffer Snapshot — tests for buffer_to_snapshot / buffer_from_snapshot.

Invariants:
    - to_snapshot produces a JSON-safe dict of capacity + values
    - from_snapshot restores capacity and values exactly
    - Invalid payloads raise InvalidSnapshotError
"""

import json

import pytest
from pydantic import ValidationError

from intbuffer.core.buffer_snapshot import buffer_from_snapshot, buffer_to_snapshot
from intbuffer.core.errors import AllocationError, InvalidSnapshotError
from intbuffer.core.resizable_buffer import ResizableIntBuffer


def test_snapshot_of_default_buffer():
    assert buffer_to_snapshot(ResizableIntBuffer()) == {
        "capacity": 4, "values": [0, 0, 0, 0],
    }


def test_snapshot_is_json_safe():
    buffer = ResizableIntBuffer()
    buffer.set(10, 7)
    assert json.loads(json.dumps(buffer_to_snapshot(buffer)))["capacity"] == 20


def test_snapshot_values_are_a_copy():
    buffer = ResizableIntBuffer()
    snapshot = buffer_to_snapshot(buffer)
    snapshot["values"][0] = 5
    assert buffer.get(0) == 0


def test_restore_preserves_values_and_capacity():
    buffer = ResizableIntBuffer()
    buffer.set(1, -2)
    buffer.set(5, 9)
    restored = buffer_from_snapshot(buffer_to_snapshot(buffer))
    assert restored.length() == 10
    assert restored.get(1) == -2
    assert restored.get(5) == 9
    assert buffer_to_snapshot(restored) == buffer_to_snapshot(buffer)


def test_restore_zero_capacity_then_write_index_zero():
    restored = buffer_from_snapshot({"capacity": 0, "values": []})
    assert restored.length() == 0
    restored.set(0, 1)
    assert restored.to_array() == [1]


def test_restore_applies_max_capacity():
    restored = buffer_from_snapshot({"capacity": 2, "values": [1, 2]}, max_capacity=6)
    assert restored.max_capacity == 6
    restored.set(4, 1)
    assert restored.length() == 6


def test_restore_rejects_ceiling_below_default():
    with pytest.raises(AllocationError):
        buffer_from_snapshot({"capacity": 2, "values": [1, 2]}, max_capacity=2)


def test_restore_over_max_capacity_raises():
    with pytest.raises(AllocationError):
        buffer_from_snapshot(
            {"capacity": 5, "values": [1, 2, 3, 4, 5]}, max_capacity=4,
        )


@pytest.mark.parametrize("payload", [
    {"capacity": 2, "values": [1]},
    {"capacity": -1, "values": []},
    {"capacity": 1, "values": ["1"]},
    {"capacity": 1, "values": [2 ** 63]},
    {"values": []},
    {},
])
def test_invalid_snapshot_raises(payload):
    with pytest.raises(InvalidSnapshotError) as exc_info:
        buffer_from_snapshot(payload)
    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert isinstance(exc_info.value, ValueError)
