# topmark:header:start
#
#   project      : Versalog
#   file         : levels.py
#   file_relpath : src/versalog/cli/commands/levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog `levels` command: list the log levels and their console colors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from versalog.core.levels import emittable_levels

if TYPE_CHECKING:
    from versalog.interaction.versatile import VersatileIO


@click.command(
    name="levels",
    help="List the log levels with their value and console color.",
)
def levels_command() -> None:
    """Write one line per level, in that level's color."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    io: VersatileIO = ctx.obj["io"]

    for level in emittable_levels():
        color = io.level_colors.get(level)
        if color is None:
            continue
        io.write_line(f"{int(level)}  {level.tag:<10} {color.name.lower()}", color)
