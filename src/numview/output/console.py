"""Rich Console factory, theme, and the markup decorator for glyph strings.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes unless
``force_terminal`` is set.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from numview.domain.decoration import Role

NUMVIEW_THEME = Theme(
    {
        "nv.title": "bold magenta",
        "nv.rule": "magenta",
        "nv.heading": "bold cyan",
        "nv.underline": "cyan",
        "nv.key": "dim",
        "nv.input": "yellow",
        "nv.value": "green",
        "nv.hex": "blue",
        "nv.octal": "yellow",
        "nv.binary": "cyan",
        "nv.exponent": "magenta",
        "nv.error": "bold red",
        "nv.hint": "yellow",
        "nv.warning": "bold yellow",
        "nv.bit.set": "green",
        "nv.bit.clear": "dim",
        "nv.field.sign": "magenta",
        "nv.field.exponent": "cyan",
        "nv.field.fraction": "green",
        "nv.field.separator": "dim",
        "nv.meter.edge": "dim",
        "nv.meter.track": "default",
        "nv.meter.zero": "blue",
        "nv.meter.pointer": "bold yellow",
        "nv.banner": "blue",
    }
)


def create_console(
    *,
    no_color: bool = False,
    width: int | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
        force_terminal: Emit styles even though the buffer is not a TTY.
    """
    return Console(
        file=StringIO(),
        theme=NUMVIEW_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
        force_terminal=force_terminal,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_role(role: Role) -> str:
    """Return the Rich style name for a semantic role."""
    return f"nv.{role}"


def markup_decorator(text: str, role: Role) -> str:
    """Wrap *text* in Rich markup for *role*."""
    style = style_for_role(role)
    return f"[{style}]{escape(text)}[/{style}]"
