"""Exhaustive dispatch from a DomainValue to its derived fact bundle."""

from __future__ import annotations

from typing import TypeAlias, assert_never

from numview.domain.floats import FloatFacts, float_facts
from numview.domain.integers import (
    BIT_CLEAR_GLYPH,
    BIT_SET_GLYPH,
    IntegerFacts,
    integer_facts,
)
from numview.domain.values import DomainValue, FloatValue, IntegerValue

Facts: TypeAlias = IntegerFacts | FloatFacts


def derive_facts(
    value: DomainValue,
    *,
    set_glyph: str = BIT_SET_GLYPH,
    clear_glyph: str = BIT_CLEAR_GLYPH,
) -> Facts:
    """Compute every derived representation of *value*.

    The glyph arguments only affect the integer bit string.
    """
    match value:
        case IntegerValue(value=n):
            return integer_facts(n, set_glyph=set_glyph, clear_glyph=clear_glyph)
        case FloatValue(value=f):
            return float_facts(f)
        case _:
            assert_never(value)
