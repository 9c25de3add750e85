"""Root numview command with global flags."""

from __future__ import annotations

import click

from numview import __version__
from numview.commands._base import NumviewCommand
from numview.commands._context import AppContext
from numview.config.settings import NumviewSettings


@click.command(
    cls=NumviewCommand,
    examples="""\
  numview
  numview 42
  numview 0b1010
  numview 0o52
  numview 0x2a
  numview 1_234_567
  numview -10
  numview 3.14
  numview -2e5
  numview inf
  numview --json 5e-324""",
)
@click.version_option(version=__version__, prog_name="numview")
@click.argument("number", required=False)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the parsed value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option("--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    number: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Show NUMBER in multiple bases plus some ASCII visuals.

    Accepted forms: decimal (42), float (3.14, -2e5, inf, nan),
    binary (0b1010), octal (0o52), hex (0x2a). Underscores are ignored.
    If NUMBER is omitted, it defaults to 1337.
    """
    settings = NumviewSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_color=no_color,
    )
    app = AppContext(settings)
    ctx.obj = app

    from numview.services.inspect import InspectService

    app.emit(InspectService(settings).inspect(number))
