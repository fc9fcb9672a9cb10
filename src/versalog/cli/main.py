# topmark:header:start
#
#   project      : Versalog
#   file         : main.py
#   file_relpath : src/versalog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog command line: a playground for the logger and `VersatileIO`.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``"settings"``: the `Settings` in effect (file + environment);
- ``"console"``: the `ConsoleHandler` bound to stdout/stdin;
- ``"io"``: a `VersatileIO` wired to that handler, its threshold taken from
  ``-v`` / ``-q`` when given and from the settings otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from versalog.cli.commands.levels import levels_command
from versalog.cli.commands.log import log_command
from versalog.cli.commands.render import render_command
from versalog.cli.commands.select import select_command
from versalog.cli.commands.version import version_command
from versalog.cli.errors import VersalogConfigError
from versalog.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    config_option,
    resolve_color_mode,
    resolve_verbosity,
)
from versalog.config.logging import get_logger, resolve_env_log_level, setup_logging
from versalog.config.settings import Settings
from versalog.core.errors import ConfigError
from versalog.core.levels import LogLevel
from versalog.interaction.colors import ConsoleColor
from versalog.interaction.console import ConsoleHandler

if TYPE_CHECKING:
    from pathlib import Path

    from versalog.interaction.versatile import VersatileIO

logger = get_logger(__name__)


def load_settings(config_path: Path | None) -> Settings:
    """Return the settings from ``config_path`` (or discovery) plus environment overrides.

    Raises:
        VersalogConfigError: If a value in the file or the environment is invalid.
    """
    try:
        base = Settings.from_toml_file(config_path) if config_path else Settings.discover()
        return base.with_env()
    except ConfigError as exc:
        raise VersalogConfigError(f"Invalid configuration: {exc}") from exc


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (settings, verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit settings file from ``--config``.
    """
    ctx.obj = ctx.obj or {}

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    settings = load_settings(config_path)
    ctx.obj["settings"] = settings

    console = ConsoleHandler(
        settings.level_colors.get(LogLevel.INTERFACE, ConsoleColor.WHITE),
        enable_color=enable_color,
    )
    ctx.obj["console"] = console

    io: VersatileIO = settings.build_io(console)
    level_cli = resolve_verbosity(verbose, quiet)
    if level_cli is not None:
        io.min_log_level = level_cli
    ctx.obj["io"] = io
    logger.debug("CLI state: color=%s, min_log_level=%s", enable_color, io.min_log_level.name)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Versalog CLI",
)
@common_verbose_options
@common_color_options
@config_option
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the Versalog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    io: VersatileIO = ctx.obj["io"]

    if ctx.invoked_subcommand is None:
        io.interface("Hint: use 'versalog log INFO \"hello {0}\" world' to log a line.")
        io.interface("")
        click.echo(ctx.get_help(), color=ctx.color)


cli.add_command(version_command)

cli.add_command(levels_command)

cli.add_command(log_command)

cli.add_command(render_command)

cli.add_command(select_command)

if __name__ == "__main__":
    cli()
