"""Error Hierarchy — verifies codes, categories, builtin bases and the dict envelope.

Tests:
    - Each error carries its code, category and severity
    - Each error is also catchable as the matching builtin exception
    - to_dict() is JSON-safe and carries the context fields
"""

import json

import pytest

from intbuffer.core.errors import (
    AllocationError, ErrorCategory, ErrorContext, ErrorSeverity,
    IndexOutOfRangeError, IntBufferError, InvalidIndexError,
    InvalidSnapshotError, InvalidValueError,
)


@pytest.mark.parametrize("error,code,category,builtin", [
    (IndexOutOfRangeError(5, 4), "INDEX_OUT_OF_RANGE", ErrorCategory.BOUNDS, IndexError),
    (InvalidIndexError("1"), "INVALID_INDEX", ErrorCategory.VALIDATION, TypeError),
    (InvalidValueError(1.5, "not int"), "INVALID_VALUE", ErrorCategory.VALIDATION, ValueError),
    (InvalidSnapshotError("bad"), "INVALID_SNAPSHOT", ErrorCategory.VALIDATION, ValueError),
    (AllocationError(40, 4, "too big"), "ALLOCATION_FAILED", ErrorCategory.RESOURCE, MemoryError),
])
def test_error_codes_and_bases(error, code, category, builtin):
    assert isinstance(error, IntBufferError)
    assert isinstance(error, builtin)
    assert error.code == code
    assert error.category == category


def test_allocation_error_is_critical():
    assert AllocationError(40, 4, "too big").severity == ErrorSeverity.CRITICAL


def test_index_error_message_names_index_and_capacity():
    error = IndexOutOfRangeError(7, 4)
    assert str(error) == "Index 7 out of range for capacity 4"
    assert error.context.index == 7
    assert error.context.capacity == 4


def test_to_dict_is_json_safe():
    envelope = InvalidValueError(1.5, "expected int, got float").to_dict()
    json.dumps(envelope)
    assert envelope["error"]["code"] == "INVALID_VALUE"
    assert envelope["error"]["context"]["value"] == "1.5"


def test_supplied_context_is_kept():
    ctx = ErrorContext(debug_info={"caller": "test"})
    error = IndexOutOfRangeError(9, 4, context=ctx)
    assert error.context is ctx
    assert error.context.debug_info == {"caller": "test"}


def test_allocation_error_records_requested_size():
    error = AllocationError(40, 4, "too big")
    assert error.requested == 40
    assert error.context.debug_info == {"requested": 40}
