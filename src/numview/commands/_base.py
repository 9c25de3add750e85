"""Custom Click command with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class NumviewCommand(click.Command):
    """Click Command that supports ``--examples`` and negative positionals.

    Unknown short options are passed through as arguments, so literals
    such as ``-10``, ``-inf`` or ``-1e5`` reach the NUMBER argument
    without a ``--`` separator.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = kwargs.setdefault("context_settings", {})
        context_settings.setdefault("ignore_unknown_options", True)
        context_settings.setdefault("help_option_names", ["-h", "--help"])
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
