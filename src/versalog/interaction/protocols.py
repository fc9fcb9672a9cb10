# topmark:header:start
#
#   project      : Versalog
#   file         : protocols.py
#   file_relpath : src/versalog/interaction/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic interfaces for the versatile I/O layer.

`VersatileIO` depends only on these protocols. Concrete adapters (a Click
console, a GUI, a test double) implement them and install themselves as the
current handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from versalog.interaction.colors import ConsoleColor
    from versalog.interaction.versatile import VersatileIO


class OutputSink(Protocol):
    """Destination for user-facing output."""

    def log_part(self, text: str, color: ConsoleColor | None) -> None:
        """Write ``text`` without a newline; ``None`` keeps the last active color."""
        ...

    def log_line(self, line: str, color: ConsoleColor) -> None:
        """Write ``line`` followed by a newline."""
        ...


class InputProvider(Protocol):
    """Source of user input. Implementations may block indefinitely."""

    def get_string(self, prompt: str) -> str | None:
        """Return a line of text entered by the user."""
        ...

    def get_number(self, prompt: str) -> float:
        """Return a number entered by the user (``nan`` when none could be read)."""
        ...

    def get_selection(self, prompt: str, options: Mapping[str, object]) -> str | None:
        """Return the key of the chosen option."""
        ...

    def get_selection_ignorable(self, prompt: str, options: Mapping[str, object]) -> str | None:
        """Return the key of the chosen option, or ``None`` if the user declined."""
        ...


class VersatileHandler(OutputSink, InputProvider, Protocol):
    """A bundle of output and input callbacks that can configure a `VersatileIO`."""

    def install(self, io: VersatileIO) -> None:
        """Assign this handler's callbacks to every slot of ``io``."""
        ...
