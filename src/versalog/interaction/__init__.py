# topmark:header:start
#
#   project      : Versalog
#   file         : __init__.py
#   file_relpath : src/versalog/interaction/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Versatile user interaction: output routing, prompts and selections."""

from __future__ import annotations

from versalog.interaction.colors import ConsoleColor
from versalog.interaction.console import ConsoleHandler
from versalog.interaction.handler import VersatileHandlerBase
from versalog.interaction.versatile import DEFAULT_LEVEL_COLORS, InteractionType, VersatileIO

__all__ = [
    "DEFAULT_LEVEL_COLORS",
    "ConsoleColor",
    "ConsoleHandler",
    "InteractionType",
    "VersatileHandlerBase",
    "VersatileIO",
]
