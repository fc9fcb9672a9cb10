# topmark:header:start
#
#   project      : Versalog
#   file         : slot.py
#   file_relpath : src/versalog/logger/slot.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Holder for a "current" logger and the module-level convenience functions.

A `LoggerSlot` is an explicit context object: components that want a shared
logger can be handed a slot instead of reaching for global state. Replacing the
logger held by a slot closes the previous one, so its file handle is never
leaked.

`DEFAULT_SLOT` backs the convenience functions (`log_info`, `log_error`, ...)
for scripts that just want one process-wide logger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from versalog.config.logging import get_logger
from versalog.core.errors import LoggerNotInitializedError
from versalog.core.levels import LogLevel
from versalog.logger.logger import Logger

if TYPE_CHECKING:
    from os import PathLike

    from versalog.config.logging import VersalogLogger

logger: VersalogLogger = get_logger(__name__)


class LoggerSlot:
    """Owns the current `Logger` of some scope."""

    def __init__(self, instance: Logger | None = None) -> None:
        self._instance: Logger | None = instance

    @property
    def is_initialized(self) -> bool:
        """True when a logger is installed."""
        return self._instance is not None

    @property
    def instance(self) -> Logger:
        """The installed logger.

        Raises:
            LoggerNotInitializedError: If no logger was installed yet.
        """
        if self._instance is None:
            raise LoggerNotInitializedError(
                "No logger installed; call initialize() or install() first."
            )
        return self._instance

    def initialize(
        self,
        output_file: str | PathLike[str] | None = None,
        include_timestamps: bool = True,
        min_logging: LogLevel = LogLevel.INFO,
        min_file_logging: LogLevel = LogLevel.DEBUG,
    ) -> Logger:
        """Create a new logger and install it, closing the previous one.

        Returns:
            Logger: The newly installed logger.
        """
        return self.install(
            Logger(output_file, include_timestamps, min_logging, min_file_logging)
        )

    def install(self, instance: Logger) -> Logger:
        """Install ``instance``; a different previously installed logger is closed."""
        previous = self._instance
        if previous is not None and previous is not instance:
            logger.debug("replacing installed logger %r", previous)
            previous.close()
        self._instance = instance
        return instance

    def reset(self) -> None:
        """Close and forget the installed logger, if any."""
        if self._instance is not None:
            self._instance.close()
        self._instance = None


DEFAULT_SLOT = LoggerSlot()


def initialize(
    output_file: str | PathLike[str] | None = None,
    include_timestamps: bool = True,
    min_logging: LogLevel = LogLevel.INFO,
    min_file_logging: LogLevel = LogLevel.DEBUG,
) -> Logger:
    """Initialize the default slot; see `LoggerSlot.initialize`."""
    return DEFAULT_SLOT.initialize(output_file, include_timestamps, min_logging, min_file_logging)


def get_instance() -> Logger:
    """Return the logger of the default slot."""
    return DEFAULT_SLOT.instance


def log_debug(text: str, *args: object) -> None:
    """Log at ``DEBUG`` through the default slot."""
    DEFAULT_SLOT.instance.debug(text, *args)


def log_info(text: str, *args: object) -> None:
    """Log at ``INFO`` through the default slot."""
    DEFAULT_SLOT.instance.info(text, *args)


def log_success(text: str, *args: object) -> None:
    """Log at ``SUCCESS`` through the default slot."""
    DEFAULT_SLOT.instance.success(text, *args)


def log_warning(text: str, *args: object) -> None:
    """Log at ``WARNING`` through the default slot."""
    DEFAULT_SLOT.instance.warning(text, *args)


def log_error(text: str | BaseException, *args: object) -> None:
    """Log at ``ERROR`` (text or exception) through the default slot."""
    DEFAULT_SLOT.instance.error(text, *args)


def log_fatal(text: str, *args: object) -> None:
    """Log at ``FATAL`` through the default slot."""
    DEFAULT_SLOT.instance.fatal(text, *args)


def log_interface(text: str, *args: object) -> None:
    """Log a prompt at ``INTERFACE`` through the default slot."""
    DEFAULT_SLOT.instance.interface(text, *args)
