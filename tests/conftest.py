# topmark:header:start
#
#   project      : Versalog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Versalog test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides `RecordingHandler`, a scripted `VersatileHandlerBase`
used wherever a test needs to observe or drive a `VersatileIO`.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from versalog.config import logging
from versalog.constants import ENV_LOG_FILE, ENV_MIN_FILE_LEVEL, ENV_MIN_LEVEL, ENV_TIMESTAMPS
from versalog.core.events import LogEvent
from versalog.core.levels import LogLevel
from versalog.interaction.handler import VersatileHandlerBase
from versalog.interaction.versatile import VersatileIO
from versalog.logger.logger import Logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from versalog.interaction.colors import ConsoleColor

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)

FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53)


class RecordingHandler(VersatileHandlerBase):
    """Handler that records output and answers prompts from a script.

    Args:
        answers (list[object] | None): Values returned by successive input
            callbacks, in order. When exhausted, inputs return ``None`` (or
            ``nan`` for numbers).

    Attributes:
        lines (list[tuple[str, ConsoleColor]]): Full lines received.
        parts (list[tuple[str, ConsoleColor | None]]): Parts received.
        prompts (list[str]): Prompts received by the input callbacks.
        offered (list[dict[str, object]]): Option mappings received by selections.
    """

    def __init__(self, answers: list[object] | None = None) -> None:
        self.answers: list[object] = list(answers or [])
        self.lines: list[tuple[str, ConsoleColor]] = []
        self.parts: list[tuple[str, ConsoleColor | None]] = []
        self.prompts: list[str] = []
        self.offered: list[dict[str, object]] = []

    def _next(self, prompt: str) -> object:
        self.prompts.append(prompt)
        return self.answers.pop(0) if self.answers else None

    def log_part(self, text: str, color: ConsoleColor | None) -> None:
        self.parts.append((text, color))

    def log_line(self, line: str, color: ConsoleColor) -> None:
        self.lines.append((line, color))

    def get_string(self, prompt: str) -> str | None:
        answer = self._next(prompt)
        return None if answer is None else str(answer)

    def get_number(self, prompt: str) -> float:
        answer = self._next(prompt)
        return float("nan") if answer is None else float(cast("float", answer))

    def get_selection(self, prompt: str, options: Mapping[str, object]) -> str | None:
        self.offered.append(dict(options))
        answer = self._next(prompt)
        return None if answer is None else str(answer)

    def get_selection_ignorable(self, prompt: str, options: Mapping[str, object]) -> str | None:
        return self.get_selection(prompt, options)

    @property
    def texts(self) -> list[str]:
        """Text of the recorded full lines."""
        return [text for text, _ in self.lines]


@pytest.fixture(autouse=True)
def clean_versalog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no Versalog environment variable leaks in from the developer shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (
        logging.ENV_LOG_LEVEL,
        ENV_MIN_LEVEL,
        ENV_MIN_FILE_LEVEL,
        ENV_LOG_FILE,
        ENV_TIMESTAMPS,
        "FORCE_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the internal diagnostics level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def recorder() -> RecordingHandler:
    """Return a fresh `RecordingHandler` without scripted answers."""
    return RecordingHandler()


@pytest.fixture
def io(recorder: RecordingHandler) -> VersatileIO:
    """Return a `VersatileIO` wired to ``recorder``."""
    versatile = VersatileIO()
    versatile.set_handler(recorder, message=False)
    return versatile


@pytest.fixture
def events() -> list[LogEvent]:
    """Return an empty list to collect `LogEvent` objects."""
    return []


@pytest.fixture
def plain_logger(events: list[LogEvent]) -> Iterator[Logger]:
    """Return a file-less logger without timestamps whose lines and parts land in ``events``."""
    log = Logger(include_timestamps=False, min_logging=LogLevel.DEBUG)
    log.on_log += events.append
    log.on_log_part += events.append
    yield log
    log.close()