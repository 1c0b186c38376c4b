"""Buffer Schemas — Pydantic model for exported/restored buffer contents.

Invariants:
    - capacity >= 0
    - len(values) == capacity
    - Every value fits a signed 64-bit slot

Design Decisions:
    - Field constraints over manual checks: Pydantic reports every violation at once
    - StrictInt: "3" or 3.0 in a payload is rejected, not silently coerced
"""

from pydantic import BaseModel, Field, StrictInt, model_validator

from intbuffer.core.domain_types import INT64_MAX, INT64_MIN


class BufferSnapshot(BaseModel):
    """JSON-safe image of a buffer: capacity plus every slot in index order."""
    capacity: StrictInt = Field(ge=0)
    values: list[StrictInt]

    @model_validator(mode="after")
    def check_values(self) -> "BufferSnapshot":
        if len(self.values) != self.capacity:
            raise ValueError(
                f"values has {len(self.values)} entries, capacity is {self.capacity}",
            )
        for value in self.values:
            if not INT64_MIN <= value <= INT64_MAX:
                raise ValueError(f"value {value} outside the signed 64-bit range")
        return self
