"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, numview.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

INTEGER_SECTIONS: tuple[str, ...] = ("bases", "base_e", "banner", "bits", "meter")
FLOAT_SECTIONS: tuple[str, ...] = ("float", "ieee_bits", "fields", "value_form")
ALL_SECTIONS: tuple[str, ...] = INTEGER_SECTIONS + FLOAT_SECTIONS


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    color: bool = True
    bit_set_glyph: str = Field(default="#", min_length=1, max_length=1)
    bit_clear_glyph: str = Field(default=".", min_length=1, max_length=1)
    sections: tuple[str, ...] = ALL_SECTIONS

    @field_validator("sections")
    @classmethod
    def _known_sections(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [name for name in value if name not in ALL_SECTIONS]
        if unknown:
            msg = f"Unknown display sections: {', '.join(unknown)}"
            raise ValueError(msg)
        return value


class InspectConfig(BaseModel):
    """[inspect] section."""

    model_config = {"frozen": True}

    default_literal: str = "1337"
