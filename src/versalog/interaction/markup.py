# topmark:header:start
#
#   project      : Versalog
#   file         : markup.py
#   file_relpath : src/versalog/interaction/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline color markup: ``"&Cred&F white"`` style strings.

An *escape* character announces that the next character is a color code: a
single hex digit selecting a `ConsoleColor`. The scanner is a two-state
machine:

- ``LITERAL``: characters accumulate into the current run; the escape
  character switches to ``EXPECT_CODE``.
- ``EXPECT_CODE``: a valid hex digit closes the current run (it keeps the color
  that was active while it was written) and activates the new color. Any other
  character is not an error: the escape character and that character are kept
  verbatim in the run. Either way the scanner returns to ``LITERAL``.

A lone escape character at the very end of the text is kept verbatim as well.

The initial active color is ``None``, which sinks read as "continue with the
last color used".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from versalog.core.formatting import format_best_effort
from versalog.interaction.colors import ConsoleColor

if TYPE_CHECKING:
    from collections.abc import Iterable


class ScanState(Enum):
    """States of the markup scanner."""

    LITERAL = auto()
    EXPECT_CODE = auto()


@dataclass(frozen=True)
class Segment:
    """A run of text written with a single color.

    Attributes:
        text (str): The run's text (never empty).
        color (ConsoleColor | None): Active color; ``None`` means "last used".
    """

    text: str
    color: ConsoleColor | None


def validate_escape(escape: str) -> str:
    """Return ``escape`` if it is exactly one character.

    Raises:
        ValueError: If ``escape`` is empty or longer than one character.
    """
    if len(escape) != 1:
        raise ValueError(f"Escape must be a single character, got {escape!r}.")
    return escape


def scan(text: str, escape: str) -> list[Segment]:
    """Split ``text`` into colored runs according to the inline markup.

    Args:
        text (str): Markup text.
        escape (str): Single escape character.

    Returns:
        list[Segment]: Non-empty runs in output order.
    """
    validate_escape(escape)

    segments: list[Segment] = []
    state = ScanState.LITERAL
    current: list[str] = []
    color: ConsoleColor | None = None

    def flush() -> None:
        if current:
            segments.append(Segment("".join(current), color))
            current.clear()

    for char in text:
        if state is ScanState.LITERAL:
            if char == escape:
                state = ScanState.EXPECT_CODE
            else:
                current.append(char)
            continue

        # EXPECT_CODE
        state = ScanState.LITERAL
        new_color = ConsoleColor.from_code(char)
        if new_color is None:
            current.append(escape)
            current.append(char)
            continue
        flush()
        color = new_color

    if state is ScanState.EXPECT_CODE:
        current.append(escape)
    flush()
    return segments


def encode_colors(text: str, escape: str, colors: Iterable[ConsoleColor]) -> str:
    """Replace ``{0}``, ``{1}``, ... in ``text`` with escape-encoded color codes.

    Example:
        ``encode_colors("{0}red{1}", "&", [RED, WHITE])`` returns ``"&Cred&F"``.

    Formatting is best-effort: on a template mismatch ``text`` is returned
    unchanged.
    """
    validate_escape(escape)
    codes = [escape + ConsoleColor(c).code for c in colors]
    return format_best_effort(text, codes)


def strip_markup(text: str, escape: str) -> str:
    """Return the plain text that `scan` would output, without color changes."""
    return "".join(segment.text for segment in scan(text, escape))
