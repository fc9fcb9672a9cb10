# topmark:header:start
#
#   project      : Versalog
#   file         : __init__.py
#   file_relpath : src/versalog/logger/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leveled logger, logger slots and preset sinks."""

from __future__ import annotations

from versalog.logger.logger import Logger
from versalog.logger.presets import (
    DebuggerSink,
    PresetType,
    attach_console,
    attach_debugger,
    initialize_preset,
    level_color,
)
from versalog.logger.slot import (
    DEFAULT_SLOT,
    LoggerSlot,
    get_instance,
    initialize,
    log_debug,
    log_error,
    log_fatal,
    log_info,
    log_interface,
    log_success,
    log_warning,
)

__all__ = [
    "DEFAULT_SLOT",
    "DebuggerSink",
    "Logger",
    "LoggerSlot",
    "PresetType",
    "attach_console",
    "attach_debugger",
    "get_instance",
    "initialize",
    "initialize_preset",
    "level_color",
    "log_debug",
    "log_error",
    "log_fatal",
    "log_info",
    "log_interface",
    "log_success",
    "log_warning",
]
