# topmark:header:start
#
#   project      : Versalog
#   file         : log.py
#   file_relpath : src/versalog/cli/commands/log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog `log` command.

Logs one line through a `Logger` initialized from the settings in effect, so
the console output, the optional file mirror and both thresholds behave
exactly as they would in an application.

Example:
    ```sh
    versalog log warning "{0} of {1} disks full" 3 4 --file app.log
    ```
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

import click

from versalog.cli.cli_types import LevelParam
from versalog.cli.errors import VersalogIOError
from versalog.config.logging import get_logger
from versalog.logger.slot import LoggerSlot

if TYPE_CHECKING:
    from versalog.config.settings import Settings
    from versalog.core.levels import LogLevel
    from versalog.interaction.versatile import VersatileIO

logger = get_logger(__name__)


@click.command(
    name="log",
    help="Log TEXT at LEVEL; {0}, {1}, ... in TEXT are filled from ARGS.",
)
@click.argument("level", type=LevelParam())
@click.argument("text")
@click.argument("args", nargs=-1)
@click.option(
    "--file",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also append the line to this file (overrides the settings).",
)
@click.option(
    "--min-level",
    "min_level",
    type=LevelParam(allow_block=True),
    default=None,
    help="Minimum level shown on the console (overrides the settings).",
)
@click.option(
    "--min-file-level",
    "min_file_level",
    type=LevelParam(allow_block=True),
    default=None,
    help="Minimum level written to the file (overrides the settings).",
)
@click.option(
    "--timestamps/--no-timestamps",
    "timestamps",
    default=None,
    help="Prefix lines with the time of day (overrides the settings).",
)
@click.option(
    "--part",
    is_flag=True,
    default=False,
    help="Log TEXT as a part: no prefix, no newline.",
)
def log_command(
    *,
    level: LogLevel,
    text: str,
    args: tuple[str, ...],
    output_file: Path | None,
    min_level: LogLevel | None,
    min_file_level: LogLevel | None,
    timestamps: bool | None,
    part: bool,
) -> None:
    """Log one message through a freshly initialized logger.

    Args:
        level (LogLevel): Message level.
        text (str): Message template.
        args (tuple[str, ...]): Template arguments.
        output_file (Path | None): File mirror override.
        min_level (LogLevel | None): Console threshold override.
        min_file_level (LogLevel | None): File threshold override.
        timestamps (bool | None): Timestamp override.
        part (bool): Use `Logger.log_part` instead of `Logger.log_line`.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    settings: Settings = ctx.obj["settings"]
    io: VersatileIO = ctx.obj["io"]

    changes: dict[str, object] = {}
    if output_file is not None:
        changes["output_file"] = output_file
    if min_level is not None:
        changes["min_logging"] = min_level
    if min_file_level is not None:
        changes["min_file_logging"] = min_file_level
    if timestamps is not None:
        changes["include_timestamps"] = timestamps
    effective = replace(settings, **changes) if changes else settings

    slot = LoggerSlot()
    try:
        active = effective.build(slot=slot, io=io)
    except OSError as exc:
        raise VersalogIOError(f"Cannot open log file {effective.output_file}: {exc}") from exc

    try:
        if part:
            active.log_part(level, text, *args)
            io.write_line()
        else:
            active.log_line(level, text, *args)
    finally:
        slot.reset()
    logger.debug("logged at %s via %r", level.name, active)
