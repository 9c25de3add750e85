"""Integer view derivations.

Pure functions of a signed 64-bit integer: radix forms, the natural-log
decomposition, the glyph banner, the 32-bit bit string and the range meter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from numview.domain.decoration import Decorator, Role, plain
from numview.domain.glyphs import render_banner
from numview.domain.values import I64_MAX

U64_MASK = (1 << 64) - 1

METER_WIDTH = 48
METER_ZERO_CELL = METER_WIDTH // 2

BIT_SET_GLYPH = "#"
BIT_CLEAR_GLYPH = "."

EDGE_MARK = "|"
ZERO_MARK = "|"
POINTER_MARK = "^"
TRACK_MARK = "-"


@dataclass(frozen=True)
class RadixForms:
    """Lossless re-encodings of the same 64-bit pattern."""

    decimal: str
    hexadecimal: str
    octal: str
    binary: str


@dataclass(frozen=True)
class LogDecomposition:
    """``|n| ~= mantissa * e**exponent`` with ``1 <= mantissa < e``."""

    negative: bool
    magnitude: float
    ln: float
    exponent: float
    mantissa: float


@dataclass(frozen=True)
class IntegerFacts:
    """Every derived fact the integer views need, as plain values."""

    radix: RadixForms
    scientific: str
    log: LogDecomposition | None
    banner: tuple[str, ...]
    bits: str
    meter_index: int
    meter: str


def radix_forms(n: int) -> RadixForms:
    """Hex, octal and binary render the two's-complement 64-bit pattern."""
    pattern = n & U64_MASK
    return RadixForms(
        decimal=str(n),
        hexadecimal=f"0x{pattern:x}",
        octal=f"0o{pattern:o}",
        binary=f"0b{pattern:b}",
    )


def scientific(n: int) -> str:
    return f"{float(n):.6e}"


def log_decomposition(n: int) -> LogDecomposition | None:
    """Split ``|n|`` into ``mantissa * e**exponent``.

    Returns None for zero, where ``ln`` is -infinity.
    """
    if n == 0:
        return None
    magnitude = float(abs(n))
    ln_n = math.log(magnitude)
    exponent = math.floor(ln_n)
    return LogDecomposition(
        negative=n < 0,
        magnitude=magnitude,
        ln=ln_n,
        exponent=float(exponent),
        mantissa=math.exp(ln_n - exponent),
    )


def banner(n: int, decorate: Decorator = plain) -> tuple[str, ...]:
    """Five banner rows for the decimal text of *n*."""
    return tuple(decorate(row, Role.BANNER) for row in render_banner(str(n)))


def bit_string_32(
    n: int,
    decorate: Decorator = plain,
    *,
    set_glyph: str = BIT_SET_GLYPH,
    clear_glyph: str = BIT_CLEAR_GLYPH,
) -> str:
    """Low 32 bits of *n*, MSB first, grouped in fours."""
    parts: list[str] = []
    for bit in range(31, -1, -1):
        if bit % 4 == 3 and bit != 31:
            parts.append(" ")
        if n >> bit & 1:
            parts.append(decorate(set_glyph, Role.BIT_SET))
        else:
            parts.append(decorate(clear_glyph, Role.BIT_CLEAR))
    return "".join(parts)


def round_half_up(pos: float) -> int:
    """Round a non-negative *pos* to the nearest integer, halves going up."""
    whole = math.floor(pos)
    return whole + int(pos - whole >= 0.5)


def meter_index(n: int) -> int:
    """Cell in ``0..METER_WIDTH`` for *n* relative to the i64 range.

    ``float(I64_MIN) / float(I64_MAX)`` can land below -1, so the position is
    clamped before rounding.
    """
    ratio = float(n) / float(I64_MAX)
    pos = (ratio + 1.0) / 2.0 * METER_WIDTH
    pos = min(max(pos, 0.0), float(METER_WIDTH))
    return round_half_up(pos)


def render_meter(index: int, decorate: Decorator = plain) -> str:
    """Track of ``METER_WIDTH + 1`` cells between edge marks.

    The pointer wins over the zero marker when both share a cell.
    """
    cells: list[str] = [decorate(EDGE_MARK, Role.METER_EDGE)]
    for i in range(METER_WIDTH + 1):
        if i == index:
            cells.append(decorate(POINTER_MARK, Role.METER_POINTER))
        elif i == METER_ZERO_CELL:
            cells.append(decorate(ZERO_MARK, Role.METER_ZERO))
        else:
            cells.append(decorate(TRACK_MARK, Role.METER_TRACK))
    cells.append(decorate(EDGE_MARK, Role.METER_EDGE))
    return "".join(cells)


def integer_facts(
    n: int,
    *,
    set_glyph: str = BIT_SET_GLYPH,
    clear_glyph: str = BIT_CLEAR_GLYPH,
) -> IntegerFacts:
    """Derive the full undecorated fact bundle for *n*."""
    index = meter_index(n)
    return IntegerFacts(
        radix=radix_forms(n),
        scientific=scientific(n),
        log=log_decomposition(n),
        banner=banner(n),
        bits=bit_string_32(n, set_glyph=set_glyph, clear_glyph=clear_glyph),
        meter_index=index,
        meter=render_meter(index),
    )
