"""The two-variant domain value: a signed 64-bit integer or a binary64 float.

INVARIANT: A DomainValue is immutable once constructed. Every derived view
is a pure function of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def in_i64_range(n: int) -> bool:
    """Return True if *n* fits in a signed 64-bit integer."""
    return I64_MIN <= n <= I64_MAX


class ValueKind(StrEnum):
    """Which variant a DomainValue holds."""

    INTEGER = "integer"
    FLOAT = "float"


@dataclass(frozen=True)
class IntegerValue:
    """A value in the full signed 64-bit range."""

    value: int

    def __post_init__(self) -> None:
        if not in_i64_range(self.value):
            msg = f"{self.value} is outside the signed 64-bit range"
            raise ValueError(msg)

    @property
    def kind(self) -> ValueKind:
        return ValueKind.INTEGER


@dataclass(frozen=True)
class FloatValue:
    """Any IEEE-754 binary64 value, including -0.0, subnormals, inf and NaN."""

    value: float

    @property
    def kind(self) -> ValueKind:
        return ValueKind.FLOAT


DomainValue: TypeAlias = IntegerValue | FloatValue
