# topmark:header:start
#
#   project      : Versalog
#   file         : select.py
#   file_relpath : src/versalog/cli/commands/select.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog `select` command.

Offers OPTIONS through the console handler and prints the chosen key. Options
written as ``key=value`` use ``key`` as input code; plain options are keyed by
their position (``0``, ``1``, ...).

Example:
    ```sh
    versalog select "Continue? " y=Yes n=No
    versalog select "Pick a fruit: " apple pear --ignorable
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from versalog.cli.errors import VersalogUsageError
from versalog.cli.exit_codes import ExitCode
from versalog.core.errors import SelectionArgumentError
from versalog.interaction.colors import ConsoleColor

if TYPE_CHECKING:
    from versalog.interaction.console import ConsoleHandler
    from versalog.interaction.versatile import VersatileIO


def split_options(options: tuple[str, ...]) -> tuple[list[str], list[str]]:
    """Split CLI options into positional values and alternating key/value pairs."""
    positional: list[str] = []
    pairs: list[str] = []
    for item in options:
        key, sep, value = item.partition("=")
        if sep and key:
            pairs.extend((key, value))
        else:
            positional.append(item)
    return positional, pairs


@click.command(
    name="select",
    help="Let the user choose one of OPTIONS and print its key.",
)
@click.argument("prompt")
@click.argument("options", nargs=-1, required=True)
@click.option(
    "--ignorable",
    is_flag=True,
    default=False,
    help="Allow declining: an unknown answer selects nothing (exit code 1).",
)
@click.option(
    "--no-persist",
    "no_persist",
    is_flag=True,
    default=False,
    help="Do not ask again on invalid input; fall back to the first option.",
)
def select_command(
    *,
    prompt: str,
    options: tuple[str, ...],
    ignorable: bool,
    no_persist: bool,
) -> None:
    """Run a selection and print the chosen key.

    Args:
        prompt (str): Prompt shown after the option list.
        options (tuple[str, ...]): ``key=value`` pairs or plain values.
        ignorable (bool): Use the ignorable selection slot.
        no_persist (bool): Disable re-prompting on invalid input.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    io: VersatileIO = ctx.obj["io"]
    console: ConsoleHandler = ctx.obj["console"]

    if no_persist:
        console.be_persistent = False

    positional, pairs = split_options(options)
    try:
        choice = io.get_selection_args(prompt, ignorable, *pairs, options=positional)
    except SelectionArgumentError as exc:
        raise VersalogUsageError(str(exc)) from exc

    if choice is None:
        io.warning("No option selected.")
        ctx.exit(ExitCode.FAILURE)
    io.write_line(choice, ConsoleColor.WHITE)
