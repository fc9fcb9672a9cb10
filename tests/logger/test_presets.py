# topmark:header:start
#
#   project      : Versalog
#   file         : test_presets.py
#   file_relpath : tests/logger/test_presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for logger presets: console, file-only and debugger sinks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.conftest import RecordingHandler
from versalog.core.errors import UnmappedLevelError
from versalog.core.levels import LogLevel
from versalog.interaction.colors import ConsoleColor
from versalog.interaction.versatile import VersatileIO
from versalog.logger.logger import Logger
from versalog.logger.presets import (
    DebuggerSink,
    PresetType,
    attach_console,
    attach_debugger,
    initialize_preset,
    level_color,
)
from versalog.logger.slot import LoggerSlot

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("level", "color"),
    [
        (LogLevel.DEBUG, ConsoleColor.DARK_GRAY),
        (LogLevel.INFO, ConsoleColor.GRAY),
        (LogLevel.SUCCESS, ConsoleColor.GREEN),
        (LogLevel.WARNING, ConsoleColor.YELLOW),
        (LogLevel.ERROR, ConsoleColor.RED),
        (LogLevel.FATAL, ConsoleColor.DARK_RED),
        (LogLevel.INTERFACE, ConsoleColor.BLUE),
    ],
)
def test_default_level_colors(level: LogLevel, color: ConsoleColor) -> None:
    assert level_color(level) is color


def test_unmapped_level_fails() -> None:
    with pytest.raises(UnmappedLevelError):
        level_color(LogLevel.BLOCK_ALL_LOGGING)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("console", PresetType.CONSOLE),
        ("FILE-ONLY", PresetType.FILE_ONLY),
        ("file", PresetType.FILE_ONLY),
        ("debugger", PresetType.DEBUGGER),
        ("gui", None),
    ],
)
def test_preset_parse(raw: str, expected: PresetType | None) -> None:
    assert PresetType.parse(raw) is expected


def test_console_preset_colors_lines_and_parts(io: VersatileIO, recorder: RecordingHandler) -> None:
    log = Logger(include_timestamps=False, min_logging=LogLevel.DEBUG)
    attach_console(log, io)

    log.debug("d")
    log.log_part(LogLevel.WARNING, "w")
    log.interface("?")

    assert recorder.lines == [
        ("[DEBUG] d", ConsoleColor.DARK_GRAY),
        ("?", ConsoleColor.BLUE),
    ]
    assert recorder.parts == [("w", ConsoleColor.YELLOW)]


def test_initialize_console_preset_uses_given_io(
    tmp_path: Path, io: VersatileIO, recorder: RecordingHandler
) -> None:
    slot = LoggerSlot()
    path = tmp_path / "app.log"
    log = initialize_preset(
        PresetType.CONSOLE,
        path,
        LogLevel.WARNING,
        LogLevel.DEBUG,
        include_timestamps=False,
        slot=slot,
        io=io,
    )
    try:
        assert slot.instance is log
        log.info("file only")
        log.error("both")
    finally:
        slot.reset()

    assert recorder.texts == ["[ERROR] both"]
    assert path.read_text(encoding="utf-8") == "[INFO] file only\n[ERROR] both\n"


def test_initialize_file_only_preset_has_no_subscribers(tmp_path: Path) -> None:
    slot = LoggerSlot()
    log = initialize_preset(PresetType.FILE_ONLY, tmp_path / "app.log", slot=slot)
    try:
        assert not log.on_log
        assert not log.on_log_part
    finally:
        slot.reset()


def test_debugger_sink_buffers_parts(caplog: pytest.LogCaptureFixture) -> None:
    target = logging.getLogger("tests.debugger")
    caplog.set_level(logging.DEBUG, logger="tests.debugger")
    log = Logger(include_timestamps=False, min_logging=LogLevel.DEBUG)
    sink = attach_debugger(log, DebuggerSink(target))

    log.log_part(LogLevel.INFO, "loading... ")
    assert caplog.records == []
    log.success("done")
    log.log_part(LogLevel.FATAL, "crashed")
    log.log_part(LogLevel.DEBUG, "tail")
    sink.flush()

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.DEBUG, "loading... [SUCCESS] done"),
        (logging.CRITICAL, "crashed"),
        (logging.DEBUG, "tail"),
    ]


def test_debugger_sink_keeps_call_order_around_failures(
    caplog: pytest.LogCaptureFixture,
) -> None:
    target = logging.getLogger("tests.debugger")
    caplog.set_level(logging.DEBUG, logger="tests.debugger")
    log = Logger(include_timestamps=False, min_logging=LogLevel.DEBUG)
    attach_debugger(log, DebuggerSink(target))

    log.log_part(LogLevel.INFO, "a;")
    log.log_part(LogLevel.ERROR, "b;")
    log.log_line(LogLevel.INFO, "c")

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.DEBUG, "a;"),
        (logging.ERROR, "b;"),
        (logging.DEBUG, "[INFO] c"),
    ]


def test_debugger_sink_maps_error_level(caplog: pytest.LogCaptureFixture) -> None:
    target = logging.getLogger("tests.debugger")
    caplog.set_level(logging.DEBUG, logger="tests.debugger")
    log = Logger(include_timestamps=False)
    attach_debugger(log, DebuggerSink(target))

    log.error("failed")

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.ERROR, "[ERROR] failed"),
    ]


def test_initialize_debugger_preset_subscribes_sink() -> None:
    slot = LoggerSlot()
    log = initialize_preset(PresetType.DEBUGGER, slot=slot)
    try:
        assert len(log.on_log) == 1
        assert len(log.on_log_part) == 1
    finally:
        slot.reset()
