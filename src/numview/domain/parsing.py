"""Literal classifier and parser.

Turns raw input text into exactly one DomainValue. Classification order,
first match wins:

1. ``0b`` / ``0o`` / ``0x`` prefix (lowercase only) -> base 2/8/16 integer.
2. Float-shaped text (contains ``.``, ``e`` or ``E``, or is ``nan`` /
   ``inf`` / ``infinity`` after an optional sign) -> binary64 float.
3. Plain decimal -> signed 64-bit integer.
4. Decimal that overflows i64 -> binary64 float.

Underscores are digit-group separators and are dropped before anything else.
Float overflow and underflow are values (+-inf, +-0.0), never errors.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from numview.domain.errors import (
    REASON_EMPTY,
    REASON_INVALID_DIGIT,
    REASON_INVALID_FLOAT,
    REASON_NEG_OVERFLOW,
    REASON_POS_OVERFLOW,
    InvalidDecimal,
    InvalidFloat,
    InvalidRadixLiteral,
)
from numview.domain.values import (
    I64_MAX,
    I64_MIN,
    DomainValue,
    FloatValue,
    IntegerValue,
)

logger = logging.getLogger(__name__)

RADIX_PREFIXES: dict[str, int] = {"0b": 2, "0o": 8, "0x": 16}

_RADIX_DIGITS: dict[int, frozenset[str]] = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    16: frozenset("0123456789abcdefABCDEF"),
}

_FLOAT_WORDS = frozenset({"nan", "inf", "infinity"})

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)
_DECIMAL_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_I64_MAX_DIGITS = len(str(I64_MAX))


@dataclass(frozen=True)
class ParsedLiteral:
    """A classified literal plus how it was reached."""

    value: DomainValue
    cleaned: str
    base: int = 10
    overflowed_to_float: bool = False


def strip_separators(raw: str) -> str:
    """Remove every ``_`` digit-group separator."""
    return raw.replace("_", "")


def looks_like_float(text: str) -> bool:
    """Return True if *text* should be read as a float literal."""
    if any(ch in text for ch in ".eE"):
        return True
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    return unsigned.lower() in _FLOAT_WORDS


def _split_sign(digits: str) -> tuple[bool, str]:
    if digits[:1] in ("+", "-"):
        return digits[0] == "-", digits[1:]
    return False, digits


def _checked_i64(negative: bool, magnitude: int) -> tuple[int | None, str | None]:
    value = -magnitude if negative else magnitude
    if value > I64_MAX:
        return None, REASON_POS_OVERFLOW
    if value < I64_MIN:
        return None, REASON_NEG_OVERFLOW
    return value, None


def parse_radix(raw: str, digits: str, base: int) -> int:
    """Parse the digits that follow a radix prefix into an i64.

    A single leading ``+`` or ``-`` is accepted.

    Raises:
        InvalidRadixLiteral: On empty digits, a digit outside *base*, or a
            value outside the signed 64-bit range.
    """
    if not digits:
        raise InvalidRadixLiteral(raw, base, REASON_EMPTY)
    negative, body = _split_sign(digits)
    if not body or any(ch not in _RADIX_DIGITS[base] for ch in body):
        raise InvalidRadixLiteral(raw, base, REASON_INVALID_DIGIT)
    value, reason = _checked_i64(negative, int(body, base))
    if value is None:
        raise InvalidRadixLiteral(raw, base, reason or REASON_POS_OVERFLOW)
    return value


def parse_float(raw: str, text: str) -> float:
    """Parse *text* as a correctly rounded binary64.

    Raises:
        InvalidFloat: If *text* is not a float numeral.
    """
    if not _FLOAT_PATTERN.fullmatch(text):
        raise InvalidFloat(raw, REASON_INVALID_FLOAT)
    return float(text)


def parse(raw: str) -> ParsedLiteral:
    """Classify and parse *raw*, keeping track of how it was classified.

    Raises:
        InvalidRadixLiteral: Bad ``0b``/``0o``/``0x`` literal.
        InvalidFloat: Float-shaped text that is not a float.
        InvalidDecimal: Anything else that is not a number.
    """
    cleaned = strip_separators(raw)

    for prefix, base in RADIX_PREFIXES.items():
        if cleaned.startswith(prefix):
            n = parse_radix(raw, cleaned[len(prefix) :], base)
            logger.debug("Classified %r as base-%d integer", raw, base)
            return ParsedLiteral(IntegerValue(n), cleaned, base=base)

    if looks_like_float(cleaned):
        f = parse_float(raw, cleaned)
        logger.debug("Classified %r as float", raw)
        return ParsedLiteral(FloatValue(f), cleaned)

    if not cleaned:
        raise InvalidDecimal(raw, REASON_EMPTY)
    if not _DECIMAL_PATTERN.fullmatch(cleaned):
        raise InvalidDecimal(raw, REASON_INVALID_DIGIT)

    negative, body = _split_sign(cleaned)
    significant = body.lstrip("0") or "0"
    n: int | None = None
    # Longer digit strings overflow anyway, and int() refuses very long ones.
    if len(significant) <= _I64_MAX_DIGITS:
        n, _reason = _checked_i64(negative, int(significant))
    if n is not None:
        logger.debug("Classified %r as decimal integer", raw)
        return ParsedLiteral(IntegerValue(n), cleaned)

    # Out of i64 range: the best representable form is a float.
    try:
        f = parse_float(raw, cleaned)
    except InvalidFloat as exc:
        raise InvalidDecimal(raw, exc.reason) from exc
    logger.debug("Decimal %r overflows i64; classified as float", raw)
    return ParsedLiteral(FloatValue(f), cleaned, overflowed_to_float=True)


def parse_literal(raw: str) -> DomainValue:
    """Parse *raw* into an IntegerValue or a FloatValue.

    Examples::

        parse_literal("0x2a")       # IntegerValue(42)
        parse_literal("1_234_567")  # IntegerValue(1234567)
        parse_literal("-2e5")       # FloatValue(-200000.0)
        parse_literal("1e309")      # FloatValue(inf)
    """
    return parse(raw).value
