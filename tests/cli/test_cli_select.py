# topmark:header:start
#
#   project      : Versalog
#   file         : test_cli_select.py
#   file_relpath : tests/cli/test_cli_select.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `select` command driving the console handler."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, assert_USAGE_ERROR, run_cli_in
from versalog.cli.commands.select import split_options

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_split_options() -> None:
    positional, pairs = split_options(("apple", "y=Yes", "=odd", "n=No"))

    assert positional == ["apple", "=odd"]
    assert pairs == ["y", "Yes", "n", "No"]


def test_select_keyed_options(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["--no-color", "select", "Continue? ", "y=Yes", "n=No"], input_text="N\n"
    )

    assert_SUCCESS(result)
    assert result.output == "  [y]: Yes\n  [n]: No\nContinue? n\n"


def test_select_positional_options(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["--no-color", "select", "Fruit: ", "apple", "pear"], input_text="1\n"
    )

    assert_SUCCESS(result)
    assert "  [0]: apple\n  [1]: pear\n" in result.output
    assert result.output.endswith("Fruit: 1\n")


def test_select_reprompts_until_valid(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["--no-color", "select", "? ", "y=Yes", "n=No"], input_text="maybe\ny\n"
    )

    assert_SUCCESS(result)
    assert "'maybe' is not one of the options above." in result.output
    assert result.output.count("? ") == 2
    assert result.output.endswith("y\n")


def test_select_no_persist_defaults_to_first(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path,
        ["--no-color", "select", "? ", "y=Yes", "n=No", "--no-persist"],
        input_text="maybe\n",
    )

    assert_SUCCESS(result)
    assert "Defaulting to first option." in result.output
    assert result.output.endswith("y\n")


def test_select_ignorable_decline(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path,
        ["--no-color", "select", "? ", "y=Yes", "--ignorable"],
        input_text="whatever\n",
    )

    assert_FAILURE(result)
    assert "No option selected." in result.output


def test_select_end_of_input(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "select", "? ", "y=Yes"], input_text="")

    assert_FAILURE(result)


def test_select_duplicate_keys_are_a_usage_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["select", "? ", "y=Yes", "y=Again"], input_text="y\n")

    assert_USAGE_ERROR(result)
    assert "Duplicate option key" in result.output


def test_select_requires_options(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["select", "? "])

    assert result.exit_code == 2, result.output
