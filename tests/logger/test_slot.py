# topmark:header:start
#
#   project      : Versalog
#   file         : test_slot.py
#   file_relpath : tests/logger/test_slot.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `LoggerSlot` and the module-level convenience functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from versalog.core.errors import LoggerNotInitializedError
from versalog.core.events import LogEvent
from versalog.core.levels import LogLevel
from versalog.logger import slot as slot_module
from versalog.logger.logger import Logger
from versalog.logger.slot import LoggerSlot

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def default_slot(monkeypatch: pytest.MonkeyPatch) -> Iterator[LoggerSlot]:
    """Swap the process-wide slot for a fresh one during the test."""
    fresh = LoggerSlot()
    monkeypatch.setattr(slot_module, "DEFAULT_SLOT", fresh)
    yield fresh
    fresh.reset()


def test_empty_slot_raises() -> None:
    slot = LoggerSlot()
    assert not slot.is_initialized
    with pytest.raises(LoggerNotInitializedError):
        _ = slot.instance


def test_initialize_installs_logger() -> None:
    slot = LoggerSlot()
    log = slot.initialize(None, False, LogLevel.WARNING)

    assert slot.is_initialized
    assert slot.instance is log
    assert log.min_logging is LogLevel.WARNING


def test_reinitialize_closes_previous_logger(tmp_path: Path) -> None:
    slot = LoggerSlot()
    first = slot.initialize(tmp_path / "first.log")
    second = slot.initialize(tmp_path / "second.log")

    assert first.closed
    assert not second.closed
    assert slot.instance is second
    slot.reset()
    assert second.closed
    assert not slot.is_initialized


def test_reinstalling_same_logger_keeps_it_open(tmp_path: Path) -> None:
    slot = LoggerSlot()
    log = slot.install(Logger(tmp_path / "app.log"))
    slot.install(log)
    assert not log.closed
    slot.reset()


def test_convenience_functions_use_default_slot(default_slot: LoggerSlot) -> None:
    with pytest.raises(LoggerNotInitializedError):
        slot_module.log_info("too early")

    log = slot_module.initialize(None, False, LogLevel.DEBUG)
    events: list[LogEvent] = []
    log.on_log += events.append

    slot_module.log_debug("d")
    slot_module.log_info("{0}", "i")
    slot_module.log_success("s")
    slot_module.log_warning("w")
    slot_module.log_error("e")
    slot_module.log_fatal("f")
    slot_module.log_interface("prompt")

    assert slot_module.get_instance() is log
    assert [e.message for e in events] == [
        "[DEBUG] d",
        "[INFO] i",
        "[SUCCESS] s",
        "[WARNING] w",
        "[ERROR] e",
        "[FATAL] f",
        "prompt",
    ]


def test_log_error_accepts_exception(default_slot: LoggerSlot) -> None:
    log = default_slot.initialize(include_timestamps=False)
    events: list[LogEvent] = []
    log.on_log += events.append

    slot_module.log_error(ValueError("bad"))

    assert events[0].message.startswith("[ERROR] Exception! ValueError:")
