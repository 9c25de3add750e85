"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich sections, colors, glyph
views) or machines (--json). The formatter layer adapts ServiceResult to
the requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from numview.config.models import ALL_SECTIONS

if TYPE_CHECKING:
    from numview.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = False
    bit_set_glyph: str = "#"
    bit_clear_glyph: str = "."
    sections: tuple[str, ...] = ALL_SECTIONS


def format_result(result: ServiceResult, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the full human rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from numview.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, settings)
