# topmark:header:start
#
#   project      : Versalog
#   file         : presets.py
#   file_relpath : src/versalog/logger/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Preset sinks for a `Logger`.

Presets bind a logger's events to a concrete destination:

- ``CONSOLE``: lines and parts go to a `VersatileIO`, colored per level;
- ``FILE_ONLY``: no subscriber, only the logger's own file mirror;
- ``DEBUGGER``: the ``versalog.debugger`` stdlib logger, the closest Python
  counterpart of an IDE debug output pane.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from versalog.config.logging import get_logger
from versalog.core.enum_mixins import KeyedStrEnum
from versalog.core.errors import UnmappedLevelError
from versalog.core.levels import LogLevel
from versalog.interaction.colors import ConsoleColor
from versalog.interaction.console import ConsoleHandler
from versalog.interaction.versatile import DEFAULT_LEVEL_COLORS, VersatileIO
from versalog.logger.slot import DEFAULT_SLOT, LoggerSlot

if TYPE_CHECKING:
    from os import PathLike

    from versalog.config.logging import VersalogLogger
    from versalog.core.events import LogEvent
    from versalog.logger.logger import Logger

logger: VersalogLogger = get_logger(__name__)

DEBUGGER_LOGGER_NAME: str = "versalog.debugger"


class PresetType(KeyedStrEnum):
    """Available logger presets."""

    CONSOLE = ("console", "Log to the console", ("terminal",))
    FILE_ONLY = ("file-only", "Log to the file sink only", ("file",))
    DEBUGGER = ("debugger", "Log to the debugger output", ("debug",))


def level_color(level: LogLevel) -> ConsoleColor:
    """Return the default console color for ``level``.

    Raises:
        UnmappedLevelError: For levels without a color (`LogLevel.BLOCK_ALL_LOGGING`).
    """
    try:
        return DEFAULT_LEVEL_COLORS[LogLevel(level)]
    except KeyError:
        raise UnmappedLevelError(f"No console color for level {LogLevel(level).name}.") from None


# --- Console ---


def attach_console(target: Logger, io: VersatileIO) -> None:
    """Route ``target``'s lines and parts to ``io``, colored with `level_color`."""

    def on_line(event: LogEvent) -> None:
        io.write_line(event.message, level_color(event.level))

    def on_part(event: LogEvent) -> None:
        io.write(event.message, level_color(event.level))

    target.on_log += on_line
    target.on_log_part += on_part


def console_io(*, enable_color: bool = True) -> VersatileIO:
    """Return a `VersatileIO` wired to a `ConsoleHandler` on stdout/stdin."""
    io = VersatileIO()
    io.set_handler(
        ConsoleHandler(level_color(LogLevel.INTERFACE), enable_color=enable_color),
        message=False,
    )
    return io


# --- Debugger ---


class DebuggerSink:
    """Forwards log events to a stdlib logger.

    Parts are buffered until the next full line so the debug output stays line
    oriented. ``ERROR`` and ``FATAL`` messages are reported immediately at
    ``logging.ERROR`` / ``logging.CRITICAL``; everything else at ``logging.DEBUG``.

    Args:
        target (logging.Logger | None): Destination logger. Defaults to
            ``versalog.debugger``.
    """

    def __init__(self, target: logging.Logger | None = None) -> None:
        self.target = target or get_logger(DEBUGGER_LOGGER_NAME)
        self._pending: list[str] = []

    def log_line(self, event: LogEvent) -> None:
        """Emit buffered parts followed by ``event``'s message."""
        self._pending.append(event.message)
        message = "".join(self._pending)
        self._pending.clear()
        self.target.log(_debugger_level(event.level), message)

    def log_part(self, event: LogEvent) -> None:
        """Buffer ``event``'s message; failures flush pending parts, then report at once."""
        if event.level in (LogLevel.ERROR, LogLevel.FATAL):
            self.flush()
            self.target.log(_debugger_level(event.level), event.message)
            return
        self._pending.append(event.message)

    def flush(self) -> None:
        """Emit buffered parts, if any, as one debug message."""
        if self._pending:
            self.target.debug("".join(self._pending))
            self._pending.clear()


def _debugger_level(level: LogLevel) -> int:
    if level is LogLevel.FATAL:
        return logging.CRITICAL
    if level is LogLevel.ERROR:
        return logging.ERROR
    return logging.DEBUG


def attach_debugger(target: Logger, sink: DebuggerSink | None = None) -> DebuggerSink:
    """Subscribe a `DebuggerSink` to ``target`` and return it."""
    sink = sink or DebuggerSink()
    target.on_log += sink.log_line
    target.on_log_part += sink.log_part
    return sink


# --- Initialization ---


def initialize_preset(
    preset: PresetType = PresetType.CONSOLE,
    file_path: str | PathLike[str] | None = None,
    min_output_logging: LogLevel = LogLevel.INFO,
    min_file_logging: LogLevel = LogLevel.DEBUG,
    *,
    include_timestamps: bool = True,
    slot: LoggerSlot = DEFAULT_SLOT,
    io: VersatileIO | None = None,
) -> Logger:
    """Initialize ``slot`` with a new logger and bind it to the ``preset`` sink.

    Args:
        preset (PresetType): Which sink to attach.
        file_path (str | PathLike[str] | None): File mirror, ``None`` for none.
        min_output_logging (LogLevel): Threshold for the attached sink.
        min_file_logging (LogLevel): Threshold for the file mirror.
        include_timestamps (bool): Prefix lines with ``"[HH:MM:SS] "``.
        slot (LoggerSlot): Slot receiving the logger; its previous logger is closed.
        io (VersatileIO | None): Destination for ``CONSOLE``; a console-backed
            instance is created when ``None``.

    Returns:
        Logger: The installed logger.
    """
    new_logger = slot.initialize(file_path, include_timestamps, min_output_logging, min_file_logging)

    if preset is PresetType.CONSOLE:
        attach_console(new_logger, io if io is not None else console_io())
    elif preset is PresetType.DEBUGGER:
        attach_debugger(new_logger)
    # FILE_ONLY: the logger mirrors to its own file.

    logger.debug("initialized %s preset: %r", preset.key, new_logger)
    return new_logger
