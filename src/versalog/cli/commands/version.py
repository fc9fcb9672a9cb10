# topmark:header:start
#
#   project      : Versalog
#   file         : version.py
#   file_relpath : src/versalog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog `version` command.

Prints the current Versalog version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from versalog.constants import VERSALOG_VERSION
from versalog.interaction.colors import ConsoleColor

if TYPE_CHECKING:
    from versalog.interaction.versatile import VersatileIO


@click.command(
    name="version",
    help="Show the current version of Versalog.",
)
def version_command() -> None:
    """Show the current version of Versalog."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    io: VersatileIO = ctx.obj["io"]

    io.debug("Versalog version:")
    io.write_line(VERSALOG_VERSION, ConsoleColor.WHITE)
