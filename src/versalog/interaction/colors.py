# topmark:header:start
#
#   project      : Versalog
#   file         : colors.py
#   file_relpath : src/versalog/interaction/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The 16 classic console colors.

Each color has a numeric value in ``0x0``-``0xF``; that single hex digit is the
code used by the inline color markup (see `versalog.interaction.markup`).
Colors also know the Click ``fg`` name used to render them on a terminal.
"""

from __future__ import annotations

from enum import IntEnum
from string import hexdigits

from versalog.core.enum_mixins import enum_from_name, norm_token


class ConsoleColor(IntEnum):
    """Console foreground colors, numbered like the classic 16-color palette."""

    BLACK = 0x0
    DARK_BLUE = 0x1
    DARK_GREEN = 0x2
    DARK_CYAN = 0x3
    DARK_RED = 0x4
    DARK_MAGENTA = 0x5
    DARK_YELLOW = 0x6
    GRAY = 0x7
    DARK_GRAY = 0x8
    BLUE = 0x9
    GREEN = 0xA
    CYAN = 0xB
    RED = 0xC
    MAGENTA = 0xD
    YELLOW = 0xE
    WHITE = 0xF

    @property
    def code(self) -> str:
        """Single upper-case hex digit for this color (``"C"`` for RED)."""
        return format(int(self), "X")

    @property
    def fg(self) -> str:
        """Color name understood by ``click.style(fg=...)``."""
        return _CLICK_FG[self]

    @classmethod
    def from_code(cls, char: str) -> ConsoleColor | None:
        """Return the color for a single hex digit, or ``None`` if invalid."""
        if len(char) != 1 or char not in hexdigits:
            return None
        return cls(int(char, 16))

    @classmethod
    def parse(cls, raw: str | None) -> ConsoleColor | None:
        """Parse a color name (``"dark-red"``) or hex code (``"c"``)."""
        if raw is None:
            return None
        by_code = cls.from_code(raw.strip())
        if by_code is not None:
            return by_code
        return enum_from_name(cls, norm_token(raw), case_insensitive=True)


_CLICK_FG: dict[ConsoleColor, str] = {
    ConsoleColor.BLACK: "black",
    ConsoleColor.DARK_BLUE: "blue",
    ConsoleColor.DARK_GREEN: "green",
    ConsoleColor.DARK_CYAN: "cyan",
    ConsoleColor.DARK_RED: "red",
    ConsoleColor.DARK_MAGENTA: "magenta",
    ConsoleColor.DARK_YELLOW: "yellow",
    # ANSI "white" (37) is the light gray of the classic palette.
    ConsoleColor.GRAY: "white",
    ConsoleColor.DARK_GRAY: "bright_black",
    ConsoleColor.BLUE: "bright_blue",
    ConsoleColor.GREEN: "bright_green",
    ConsoleColor.CYAN: "bright_cyan",
    ConsoleColor.RED: "bright_red",
    ConsoleColor.MAGENTA: "bright_magenta",
    ConsoleColor.YELLOW: "bright_yellow",
    ConsoleColor.WHITE: "bright_white",
}
