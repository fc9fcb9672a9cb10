# topmark:header:start
#
#   project      : Versalog
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: group behavior, `levels`, `version` and shared option resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli
from versalog.cli.errors import VersalogUsageError
from versalog.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from versalog.constants import VERSALOG_VERSION
from versalog.core.levels import LogLevel

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_version() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output == f"{VERSALOG_VERSION}\n"


@mark_cli
def test_version_verbose_shows_debug_line() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.output == f"Versalog version:\n{VERSALOG_VERSION}\n"


@mark_cli
def test_levels_lists_emittable_levels(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "levels"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == 7
    assert lines[0].split() == ["0", "DEBUG", "dark_gray"]
    assert lines[-1].split() == ["6", "INTERFACE", "blue"]


@mark_cli
def test_levels_honor_configured_colors(tmp_path: Path) -> None:
    (tmp_path / "versalog.toml").write_text('[io.colors]\nwarning = "magenta"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "levels"])

    assert_SUCCESS(result)
    assert "3  WARNING    magenta" in result.output


@mark_cli
def test_quiet_hides_below_warning(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "-q", "select", "? ", "y=Yes", "--ignorable"])

    assert_FAILURE(result)
    assert "No option selected." in result.output

    result = run_cli_in(tmp_path, ["--no-color", "-qq", "select", "? ", "y=Yes", "--ignorable"])

    assert_FAILURE(result)
    assert "No option selected." not in result.output


@mark_cli
def test_no_subcommand_shows_hint_and_help() -> None:
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert result.output.startswith("Hint: use 'versalog log")
    assert "Commands:" in result.output


@mark_cli
def test_help() -> None:
    result = run_cli(["-h"])

    assert_SUCCESS(result)
    for command in ("levels", "log", "render", "select", "version"):
        assert command in result.output


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, None),
        (1, 0, LogLevel.DEBUG),
        (3, 0, LogLevel.DEBUG),
        (0, 1, LogLevel.WARNING),
        (0, 2, LogLevel.ERROR),
        (0, 3, LogLevel.FATAL),
        (0, 5, LogLevel.FATAL),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: LogLevel | None) -> None:
    assert resolve_verbosity(verbose, quiet) is expected


def test_resolve_verbosity_conflict() -> None:
    with pytest.raises(VersalogUsageError):
        resolve_verbosity(1, 1)


def test_resolve_color_mode_explicit() -> None:
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False


def test_resolve_color_mode_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is True

    monkeypatch.setenv("FORCE_COLOR", "0")
    assert resolve_color_mode(cli_mode=None, stdout_isatty=True) is False


def test_resolve_color_mode_tty() -> None:
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True
    assert resolve_color_mode(cli_mode=None, stdout_isatty=False) is False
