# topmark:header:start
#
#   project      : Versalog
#   file         : render.py
#   file_relpath : src/versalog/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog `render` command.

Writes a line with inline color markup: the escape character followed by a hex
digit (``0``-``F``) switches color. Optional COLORS fill ``{0}``, ``{1}``, ...
with escape-encoded codes first.

Example:
    ```sh
    versalog render "&Aok&7 all done" --escape "&"
    versalog render "{0}ok{1} all done" green gray --escape "&"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from versalog.cli.cli_types import ColorParam
from versalog.cli.errors import VersalogUsageError
from versalog.interaction.markup import strip_markup, validate_escape

if TYPE_CHECKING:
    from versalog.interaction.colors import ConsoleColor
    from versalog.interaction.versatile import VersatileIO


@click.command(
    name="render",
    help="Render TEXT with inline color codes introduced by the escape character.",
)
@click.argument("text")
@click.argument("colors", nargs=-1, type=ColorParam())
@click.option(
    "--escape",
    "-e",
    required=True,
    help="Single character that introduces a color code.",
)
@click.option(
    "--strip",
    is_flag=True,
    default=False,
    help="Print the text with the markup removed instead of rendering it.",
)
def render_command(
    *,
    text: str,
    colors: tuple[ConsoleColor, ...],
    escape: str,
    strip: bool,
) -> None:
    """Render ``text`` through `VersatileIO.write_complex`."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    io: VersatileIO = ctx.obj["io"]

    try:
        validate_escape(escape)
    except ValueError as exc:
        raise VersalogUsageError(str(exc)) from exc

    if strip:
        click.echo(strip_markup(text, escape))
        return
    io.write_complex(text, escape, *colors)
