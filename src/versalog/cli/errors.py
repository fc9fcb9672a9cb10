# topmark:header:start
#
#   project      : Versalog
#   file         : errors.py
#   file_relpath : src/versalog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Versalog CLI.

Raise these from commands to stop with a standardized message and exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from versalog.cli.exit_codes import ExitCode


class VersalogCliError(click.ClickException):
    """Base class for all Versalog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text, without Click's ``Error:`` styling."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error in bright red on stderr, honoring the context color mode."""
        ctx = click.get_current_context(silent=True)
        color = ctx.color if ctx is not None else None
        click.secho(self.format_message(), file=file, err=True, fg="bright_red", color=color)


class VersalogUsageError(VersalogCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class VersalogIOError(VersalogCliError):
    """Error for a log file that cannot be opened."""

    exit_code = ExitCode.IO_ERROR


class VersalogConfigError(VersalogCliError):
    """Error for invalid settings (file values or environment overrides)."""

    exit_code = ExitCode.CONFIG_ERROR
