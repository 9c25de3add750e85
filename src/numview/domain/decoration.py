"""Semantic roles and the injected decoration strategy.

Derivations that produce glyph strings (bit strings, meter track, banner)
take a ``decorate`` callable mapping ``(text, role)`` to decorated text.
The default is :func:`plain`, so the domain never knows about colors.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TypeAlias


class Role(StrEnum):
    """What a fragment of rendered text stands for."""

    BIT_SET = "bit.set"
    BIT_CLEAR = "bit.clear"
    SIGN_BIT = "field.sign"
    EXPONENT_BIT = "field.exponent"
    FRACTION_BIT = "field.fraction"
    FIELD_SEPARATOR = "field.separator"
    METER_EDGE = "meter.edge"
    METER_TRACK = "meter.track"
    METER_ZERO = "meter.zero"
    METER_POINTER = "meter.pointer"
    BANNER = "banner"


Decorator: TypeAlias = Callable[[str, Role], str]


def plain(text: str, role: Role) -> str:
    """Identity decorator."""
    return text
