# topmark:header:start
#
#   project      : Versalog
#   file         : options.py
#   file_relpath : src/versalog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Versalog command line.

This module centralizes reusable options (verbosity, color, settings file) and
their resolution logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from versalog.cli.cli_types import EnumChoiceParam
from versalog.cli.errors import VersalogUsageError
from versalog.config.logging import get_logger
from versalog.core.levels import LogLevel

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> LogLevel | None:
    """Resolve the `VersatileIO` output threshold from ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The minimum `LogLevel` for program output, or ``None`` when neither
        flag was given (the configured level applies).

    Raises:
        VersalogUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        One or more -v flags show DEBUG lines.
        One -q flag hides everything below WARNING, two below ERROR.
        Three or more -q flags keep only FATAL and prompts.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise VersalogUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 1:
        return LogLevel.DEBUG
    if quiet_count >= 3:
        return LogLevel.FATAL
    if quiet_count == 2:
        return LogLevel.ERROR
    if quiet_count == 1:
        return LogLevel.WARNING
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show debug output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to three times for even less.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if callable(isatty) else False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a --config option naming an explicit settings file."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Settings file (versalog.toml or pyproject.toml). "
        "Defaults to the one found in the current directory.",
    )(f)
