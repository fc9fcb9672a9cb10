# topmark:header:start
#
#   project      : Versalog
#   file         : logger.py
#   file_relpath : src/versalog/logger/logger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leveled logger with event subscribers and an optional file mirror.

A `Logger` formats a message, then filters it *independently* for two sinks:

- the in-memory subscribers of `Logger.on_log` / `Logger.on_log_part`, gated by
  `Logger.min_logging`;
- the optional file sink, gated by `Logger.min_file_logging`.

Full lines look like ``"[12:04:59] [WARNING] disk almost full"``; the
timestamp is present only when `Logger.include_timestamps` is set, and lines at
`LogLevel.INTERFACE` have neither timestamp nor tag.

The file stream is owned by the logger. Release it with `Logger.close` or by
using the logger as a context manager; a finalizer closes an abandoned stream
as a last resort.

Example:
    ```python
    with Logger("app.log", include_timestamps=False) as log:
        log.on_log += lambda e: print(e.message)
        log.info("{0} files scanned", 42)
    ```
"""

from __future__ import annotations

import threading
import traceback
import weakref
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Callable, TextIO

from versalog.config.logging import get_logger
from versalog.core.errors import ReservedLevelError
from versalog.core.events import EventHook, LogEvent
from versalog.core.formatting import format_best_effort
from versalog.core.levels import LogLevel

if TYPE_CHECKING:
    from os import PathLike
    from types import TracebackType

    from versalog.config.logging import VersalogLogger

logger: VersalogLogger = get_logger(__name__)

LogObserver = Callable[[LogEvent], None]

TIMESTAMP_FORMAT: str = "%H:%M:%S"


def _close_stream(stream: TextIO, path: str) -> None:
    if not stream.closed:
        stream.flush()
        stream.close()
    logger.debug("closed log file %s", path)


class Logger:
    """Format, filter and fan out log messages.

    Args:
        output_file (str | PathLike[str] | None): File that mirrors the log, opened
            in append mode (UTF-8). ``None`` disables the file sink.
        include_timestamps (bool): Prefix full lines with ``"[HH:MM:SS] "``.
        min_logging (LogLevel): Threshold for event subscribers.
        min_file_logging (LogLevel): Threshold for the file sink.
        clock (Callable[[], datetime] | None): Source of wall-clock time for
            timestamps. Defaults to `datetime.now`.

    Attributes:
        on_log (EventHook[LogObserver]): Subscribers for `log_line` output.
        on_log_part (EventHook[LogObserver]): Subscribers for `log_part` output.
    """

    def __init__(
        self,
        output_file: str | PathLike[str] | None = None,
        include_timestamps: bool = True,
        min_logging: LogLevel = LogLevel.INFO,
        min_file_logging: LogLevel = LogLevel.DEBUG,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._output_file: Path | None = Path(output_file) if output_file is not None else None
        self._include_timestamps = include_timestamps
        self._min_logging = LogLevel(min_logging)
        self._min_file_logging = LogLevel(min_file_logging)
        self._clock: Callable[[], datetime] = clock or datetime.now
        self._lock = threading.RLock()

        self.on_log: EventHook[LogObserver] = EventHook()
        self.on_log_part: EventHook[LogObserver] = EventHook()

        self._stream: TextIO | None = None
        self._finalizer: weakref.finalize | None = None
        if self._output_file is not None:
            self._stream = self._output_file.open("a", encoding="utf-8")
            self._finalizer = weakref.finalize(
                self, _close_stream, self._stream, str(self._output_file)
            )
            logger.debug("opened log file %s", self._output_file)

    # --- Properties ---

    @property
    def output_file(self) -> Path | None:
        """Path of the file mirror, or ``None`` without file output."""
        return self._output_file

    @property
    def include_timestamps(self) -> bool:
        """Whether full lines carry a ``[HH:MM:SS]`` prefix."""
        return self._include_timestamps

    @property
    def min_logging(self) -> LogLevel:
        """Minimum level reaching the event subscribers."""
        return self._min_logging

    @property
    def min_file_logging(self) -> LogLevel:
        """Minimum level reaching the file sink (meaningless without a file)."""
        return self._min_file_logging

    @property
    def closed(self) -> bool:
        """True once `close` ran; loggers without a file are never closed."""
        return self._finalizer is not None and not self._finalizer.alive

    # --- Core ---

    def log_line(self, level: LogLevel, text: str, *args: object) -> None:
        """Log a full line at ``level``.

        Args:
            level (LogLevel): Severity of the message.
            text (str): Message template (``"{0}"`` style positional slots).
            *args (object): Template arguments.

        Raises:
            ReservedLevelError: If ``level`` is `LogLevel.BLOCK_ALL_LOGGING`.
        """
        self._check_level(level)
        line = format_best_effort(text, args)
        if level.is_prefixed:
            line = f"{self.timestamp()}[{level.tag}] {line}"
        self._dispatch(self.on_log, level, line, newline=True)

    def log_part(self, level: LogLevel, text: str, *args: object) -> None:
        """Log a piece of text at ``level``, without prefix or newline.

        Raises:
            ReservedLevelError: If ``level`` is `LogLevel.BLOCK_ALL_LOGGING`.
        """
        self._check_level(level)
        part = format_best_effort(text, args)
        self._dispatch(self.on_log_part, level, part, newline=False)

    def timestamp(self) -> str:
        """Return ``"[HH:MM:SS] "`` for now, or ``""`` when timestamps are off."""
        if not self._include_timestamps:
            return ""
        return f"[{self._clock().strftime(TIMESTAMP_FORMAT)}] "

    def _check_level(self, level: LogLevel) -> None:
        if not LogLevel(level).is_emittable:
            raise ReservedLevelError(
                f"Cannot use LogLevel {LogLevel.BLOCK_ALL_LOGGING.name} for actual logging."
            )

    def _dispatch(
        self,
        hook: EventHook[LogObserver],
        level: LogLevel,
        message: str,
        *,
        newline: bool,
    ) -> None:
        with self._lock:
            if hook and level >= self._min_logging:
                hook.fire(LogEvent(level, message))

            if self._stream is not None and not self._stream.closed:
                if level >= self._min_file_logging:
                    self._stream.write(message + "\n" if newline else message)
                    self._stream.flush()

    # --- Level shortcuts ---

    def debug(self, text: str, *args: object) -> None:
        """Log a line at ``DEBUG``."""
        self.log_line(LogLevel.DEBUG, text, *args)

    def info(self, text: str, *args: object) -> None:
        """Log a line at ``INFO``."""
        self.log_line(LogLevel.INFO, text, *args)

    def success(self, text: str, *args: object) -> None:
        """Log a line at ``SUCCESS``."""
        self.log_line(LogLevel.SUCCESS, text, *args)

    def warning(self, text: str, *args: object) -> None:
        """Log a line at ``WARNING``."""
        self.log_line(LogLevel.WARNING, text, *args)

    def error(self, text: str | BaseException, *args: object) -> None:
        """Log a line at ``ERROR``; an exception is logged via `log_exception`."""
        if isinstance(text, BaseException):
            self.log_exception(text)
            return
        self.log_line(LogLevel.ERROR, text, *args)

    def fatal(self, text: str, *args: object) -> None:
        """Log a line at ``FATAL``."""
        self.log_line(LogLevel.FATAL, text, *args)

    def interface(self, text: str, *args: object) -> None:
        """Log a prompt line at ``INTERFACE`` (no timestamp, no tag)."""
        self.log_line(LogLevel.INTERFACE, text, *args)

    def log_exception(self, exc: BaseException) -> None:
        """Log ``exc`` at ``ERROR``: its type name followed by its full traceback."""
        description = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ).rstrip()
        self.log_line(LogLevel.ERROR, "Exception! {0}: {1}", type(exc).__name__, description)

    # --- Lifecycle ---

    def close(self) -> None:
        """Flush and close the file sink. Calling it again does nothing."""
        with self._lock:
            if self._finalizer is not None:
                # finalize objects run at most once
                self._finalizer()

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(output_file={self._output_file!r}, "
            f"min_logging={self._min_logging.name}, "
            f"min_file_logging={self._min_file_logging.name})"
        )
