"""AppContext — shared Click context for the numview command.

Created once per invocation.  Configures logging and telemetry from the
settings and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from numview.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from numview.config.settings import NumviewSettings
    from numview.services.result import ServiceResult


class AppContext:
    """Settings plus output plumbing for one CLI run."""

    def __init__(self, settings: NumviewSettings) -> None:
        self.settings = settings

        # Configure structured logging
        from numview.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Enable telemetry context var when verbose
        if settings.verbose:
            from numview.services.telemetry import enable_telemetry

            enable_telemetry()

    def output_settings(self, *, isatty: bool | None = None) -> OutputSettings:
        """Translate settings into output flags.

        Color needs both the setting and a terminal on stdout.
        """
        if isatty is None:
            isatty = sys.stdout.isatty()
        display = self.settings.display
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.use_color and isatty,
            bit_set_glyph=display.bit_set_glyph,
            bit_clear_glyph=display.bit_clear_glyph,
            sections=display.sections,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings()
        output = format_result(result, settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
