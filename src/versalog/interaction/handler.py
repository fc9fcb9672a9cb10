# topmark:header:start
#
#   project      : Versalog
#   file         : handler.py
#   file_relpath : src/versalog/interaction/handler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for versatile I/O handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from versalog.interaction.colors import ConsoleColor
    from versalog.interaction.versatile import VersatileIO


class VersatileHandlerBase(ABC):
    """Bundle of callbacks that a `VersatileIO` invokes for actual I/O.

    Subclasses implement the six callbacks; `install` wires them into a
    `VersatileIO` instance, replacing whatever was configured before.
    """

    @abstractmethod
    def log_part(self, text: str, color: ConsoleColor | None) -> None:
        """Write ``text``; ``color=None`` keeps the previous output color."""

    @abstractmethod
    def log_line(self, line: str, color: ConsoleColor) -> None:
        """Write ``line`` followed by a newline."""

    @abstractmethod
    def get_string(self, prompt: str) -> str | None:
        """Prompt for a string."""

    @abstractmethod
    def get_number(self, prompt: str) -> float:
        """Prompt for a number."""

    @abstractmethod
    def get_selection(self, prompt: str, options: Mapping[str, object]) -> str | None:
        """Prompt for one of ``options``; returns its key."""

    @abstractmethod
    def get_selection_ignorable(self, prompt: str, options: Mapping[str, object]) -> str | None:
        """Prompt for one of ``options``; returns its key or ``None`` if skipped."""

    def install(self, io: VersatileIO) -> None:
        """Reset ``io``'s level table and assign all six slots to this handler."""
        io.initialize_levels()

        io.on_log_part.replace(self.log_part)
        io.on_log_line.replace(self.log_line)
        io.on_get_string = self.get_string
        io.on_get_number = self.get_number
        io.on_get_selection = self.get_selection
        io.on_get_ignorable_selection = self.get_selection_ignorable
