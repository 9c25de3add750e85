"""Float view derivations: IEEE-754 binary64 decomposition.

Bit layout (bit 63 is the most significant)::

    63 | 62 ........ 52 | 51 ................................ 0
   sign   exponent (11)              fraction (52)

INVARIANT: ``unbiased_exponent`` is ``biased - 1023`` only for normal
values. Subnormals report -1022 (the implicit leading bit is 0). Zero,
infinity and NaN have no unbiased exponent.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import StrEnum

from numview.domain.decoration import Decorator, Role, plain
from numview.domain.glyphs import superscript

EXPONENT_BITS = 11
FRACTION_BITS = 52
EXPONENT_BIAS = 1023
EXPONENT_MAX = (1 << EXPONENT_BITS) - 1
FRACTION_MASK = (1 << FRACTION_BITS) - 1
SUBNORMAL_EXPONENT = 1 - EXPONENT_BIAS

SIGN_BIT_INDEX = 63
EXPONENT_LOW_BIT_INDEX = FRACTION_BITS
FIELD_SEPARATOR = " | "

VALUE_PRECISION = 12


class FloatCategory(StrEnum):
    """IEEE-754 classification, total over all 64-bit patterns."""

    ZERO = "zero"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"
    INFINITY = "infinity"
    NAN = "nan"


def float_to_bits(f: float) -> int:
    """Raw 64-bit pattern of *f*."""
    return struct.unpack(">Q", struct.pack(">d", f))[0]


def bits_to_float(bits: int) -> float:
    return struct.unpack(">d", struct.pack(">Q", bits))[0]


def classify(biased_exponent: int, fraction: int) -> FloatCategory:
    if biased_exponent == 0:
        return FloatCategory.ZERO if fraction == 0 else FloatCategory.SUBNORMAL
    if biased_exponent == EXPONENT_MAX:
        return FloatCategory.INFINITY if fraction == 0 else FloatCategory.NAN
    return FloatCategory.NORMAL


@dataclass(frozen=True)
class FloatFields:
    """Sign, exponent and fraction fields of one binary64 pattern."""

    sign: int
    biased_exponent: int
    fraction: int
    category: FloatCategory

    @property
    def sign_symbol(self) -> str:
        return "-" if self.sign else "+"

    @property
    def unbiased_exponent(self) -> int | None:
        if self.category is FloatCategory.NORMAL:
            return self.biased_exponent - EXPONENT_BIAS
        if self.category is FloatCategory.SUBNORMAL:
            return SUBNORMAL_EXPONENT
        return None

    @property
    def frac_value(self) -> float | None:
        """``fraction / 2**52`` for finite nonzero values."""
        if self.category not in (FloatCategory.NORMAL, FloatCategory.SUBNORMAL):
            return None
        return self.fraction / (1 << FRACTION_BITS)

    @property
    def mantissa(self) -> float | None:
        """Significand with its implicit leading bit (1 for normal, 0 for subnormal)."""
        frac = self.frac_value
        if frac is None:
            return None
        if self.category is FloatCategory.NORMAL:
            return 1.0 + frac
        return frac


def decompose_bits(bits: int) -> FloatFields:
    """Split a 64-bit pattern into its IEEE-754 fields."""
    sign = bits >> SIGN_BIT_INDEX & 1
    biased = bits >> FRACTION_BITS & EXPONENT_MAX
    fraction = bits & FRACTION_MASK
    return FloatFields(
        sign=sign,
        biased_exponent=biased,
        fraction=fraction,
        category=classify(biased, fraction),
    )


def decompose(f: float) -> FloatFields:
    return decompose_bits(float_to_bits(f))


def reconstruct(fields: FloatFields) -> float:
    """Rebuild the value ``(-1)**sign * mantissa * 2**exponent`` from *fields*."""
    sign = -1.0 if fields.sign else 1.0
    match fields.category:
        case FloatCategory.NORMAL | FloatCategory.SUBNORMAL:
            assert fields.mantissa is not None
            assert fields.unbiased_exponent is not None
            return sign * math.ldexp(fields.mantissa, fields.unbiased_exponent)
        case FloatCategory.ZERO:
            return math.copysign(0.0, sign)
        case FloatCategory.INFINITY:
            return sign * math.inf
        case FloatCategory.NAN:
            return math.nan


def value_form(fields: FloatFields) -> str:
    """Human formula for the value, exponents as superscripts."""
    sign = f"(-1){superscript(fields.sign)}"
    match fields.category:
        case FloatCategory.NORMAL:
            return (
                f"{sign} × (1 + {fields.frac_value:.{VALUE_PRECISION}f})"
                f" × 2{superscript(fields.unbiased_exponent)}"
            )
        case FloatCategory.SUBNORMAL:
            return (
                f"{sign} × (0 + {fields.mantissa:.{VALUE_PRECISION}f})"
                f" × 2{superscript(SUBNORMAL_EXPONENT)}"
            )
        case FloatCategory.ZERO:
            return f"{sign} × 0"
        case FloatCategory.INFINITY:
            return f"{sign} × Infinity"
        case FloatCategory.NAN:
            return "NaN"


def _bit_role(bit: int) -> Role:
    if bit == SIGN_BIT_INDEX:
        return Role.SIGN_BIT
    if bit >= EXPONENT_LOW_BIT_INDEX:
        return Role.EXPONENT_BIT
    return Role.FRACTION_BIT


def bit_string_64(bits: int, decorate: Decorator = plain) -> str:
    """All 64 bits MSB first.

    ``" | "`` follows the sign bit and the lowest exponent bit; elsewhere a
    space follows every bit whose index is a nonzero multiple of 4.
    """
    parts: list[str] = []
    for bit in range(63, -1, -1):
        parts.append(decorate("1" if bits >> bit & 1 else "0", _bit_role(bit)))
        if bit in (SIGN_BIT_INDEX, EXPONENT_LOW_BIT_INDEX):
            parts.append(decorate(FIELD_SEPARATOR, Role.FIELD_SEPARATOR))
        elif bit and bit % 4 == 0:
            parts.append(" ")
    return "".join(parts)


@dataclass(frozen=True)
class FloatFacts:
    """Every derived fact the float views need, as plain values."""

    text: str
    scientific: str
    raw_bits: int
    hex_bits: str
    bits: str
    sign: str
    category: FloatCategory
    biased_exponent: int
    fraction: int
    fraction_hex: str
    unbiased_exponent: int | None
    frac_value: float | None
    mantissa: float | None
    value_form: str


def float_facts(f: float) -> FloatFacts:
    """Derive the full undecorated fact bundle for *f*."""
    raw = float_to_bits(f)
    fields = decompose_bits(raw)
    return FloatFacts(
        text=repr(f),
        scientific=f"{f:.6e}",
        raw_bits=raw,
        hex_bits=f"{raw:016x}",
        bits=bit_string_64(raw),
        sign=fields.sign_symbol,
        category=fields.category,
        biased_exponent=fields.biased_exponent,
        fraction=fields.fraction,
        fraction_hex=f"{fields.fraction:013x}",
        unbiased_exponent=fields.unbiased_exponent,
        frac_value=fields.frac_value,
        mantissa=fields.mantissa,
        value_form=value_form(fields),
    )
