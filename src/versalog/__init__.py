# topmark:header:start
#
#   project      : Versalog
#   file         : __init__.py
#   file_relpath : src/versalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versalog package.

Versalog is a small leveled logger with event subscribers and an optional file
mirror, plus a "versatile" I/O layer that routes user-facing output, prompts
and selections to a pluggable handler (a Click console by default).
"""

from __future__ import annotations

from versalog.config.settings import Settings
from versalog.core.errors import (
    ConfigError,
    HandlerNotConfiguredError,
    LoggerNotInitializedError,
    MissingColorError,
    ReservedLevelError,
    SelectionArgumentError,
    UnmappedLevelError,
    VersalogError,
)
from versalog.core.events import EventHook, LogEvent
from versalog.core.levels import LogLevel
from versalog.interaction import (
    ConsoleColor,
    ConsoleHandler,
    InteractionType,
    VersatileHandlerBase,
    VersatileIO,
)
from versalog.logger import (
    DEFAULT_SLOT,
    Logger,
    LoggerSlot,
    PresetType,
    initialize_preset,
    level_color,
)

__all__ = [
    "DEFAULT_SLOT",
    "ConfigError",
    "ConsoleColor",
    "ConsoleHandler",
    "EventHook",
    "HandlerNotConfiguredError",
    "InteractionType",
    "LogEvent",
    "LogLevel",
    "Logger",
    "LoggerNotInitializedError",
    "LoggerSlot",
    "MissingColorError",
    "PresetType",
    "ReservedLevelError",
    "SelectionArgumentError",
    "Settings",
    "UnmappedLevelError",
    "VersalogError",
    "VersatileHandlerBase",
    "VersatileIO",
    "initialize_preset",
    "level_color",
]
