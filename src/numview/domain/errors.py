"""Typed parse failures.

All three are terminal for the input that produced them. The service layer
turns them into a failed ServiceResult; nothing in the domain exits the
process.
"""

from __future__ import annotations

from typing import Any, ClassVar

# Reason vocabulary shared by radix and decimal integer parsing.
REASON_EMPTY = "cannot parse integer from empty string"
REASON_INVALID_DIGIT = "invalid digit found in string"
REASON_POS_OVERFLOW = "number too large to fit in target type"
REASON_NEG_OVERFLOW = "number too small to fit in target type"
REASON_INVALID_FLOAT = "invalid float literal"


class NumberParseError(ValueError):
    """Base class for literal parse failures.

    Attributes:
        raw: The input text as the user supplied it.
        reason: Short description of the underlying conversion failure.
    """

    code: ClassVar[str] = "PARSE_ERROR"
    label: ClassVar[str] = "invalid literal"

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"{self.label}: {reason}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"reason": self.reason}


class InvalidRadixLiteral(NumberParseError):
    """A ``0b``/``0o``/``0x`` literal whose digits do not form an i64."""

    code = "INVALID_RADIX_LITERAL"

    def __init__(self, raw: str, base: int, reason: str) -> None:
        self.base = base
        super().__init__(raw, reason)

    def __str__(self) -> str:
        return f"invalid base {self.base}: {self.reason}"

    @property
    def detail(self) -> dict[str, Any]:
        return {"base": self.base, "reason": self.reason}


class InvalidFloat(NumberParseError):
    """A float-shaped literal that is not a valid binary64 numeral."""

    code = "INVALID_FLOAT"
    label = "invalid float"


class InvalidDecimal(NumberParseError):
    """A plain literal that is neither an i64 nor an overflowing decimal."""

    code = "INVALID_DECIMAL"
    label = "invalid decimal"
