# topmark:header:start
#
#   project      : Versalog
#   file         : console.py
#   file_relpath : src/versalog/interaction/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based console handler for `VersatileIO`.

Output goes through ``click.echo`` / ``click.style`` so ANSI colors are
stripped automatically when the stream is not a terminal (or when color is
disabled). Input is read line by line from a text stream; end of input is
reported as "no answer" (``None``, or ``nan`` for numbers) rather than raising.
"""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING, TextIO

import click

from versalog.interaction.colors import ConsoleColor
from versalog.interaction.handler import VersatileHandlerBase

if TYPE_CHECKING:
    from collections.abc import Mapping


class ConsoleHandler(VersatileHandlerBase):
    """Versatile handler writing to and reading from console streams.

    Args:
        prompt_color (ConsoleColor): Color used for prompts and option lists.
        be_persistent (bool): Keep asking on invalid input. When False, an invalid
            number yields ``nan`` and an invalid strict selection yields the first key.
        enable_color (bool): If True, emit ANSI color codes; plain text otherwise.
        out (TextIO | None): Output stream. Defaults to `sys.stdout`.
        inp (TextIO | None): Input stream. Defaults to `sys.stdin`.

    Attributes:
        prompt_color (ConsoleColor): Color used for prompts.
        be_persistent (bool): Whether prompts repeat on invalid input.
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for output.
        inp (TextIO): Stream for input.
    """

    prompt_color: ConsoleColor
    be_persistent: bool
    enable_color: bool
    out: TextIO
    inp: TextIO

    def __init__(
        self,
        prompt_color: ConsoleColor = ConsoleColor.WHITE,
        be_persistent: bool = True,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        inp: TextIO | None = None,
    ) -> None:
        self.prompt_color = prompt_color
        self.be_persistent = be_persistent
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.inp = inp or sys.stdin
        self._color: ConsoleColor | None = None

    @property
    def current_color(self) -> ConsoleColor | None:
        """Color of the most recent output (``None`` before any colored output)."""
        return self._color

    # --- Output ---

    def log_part(self, text: str, color: ConsoleColor | None) -> None:
        """Write ``text`` without a newline, continuing the last color if ``color`` is None."""
        self._echo(text, color, nl=False)

    def log_line(self, line: str, color: ConsoleColor) -> None:
        """Write ``line`` followed by a newline."""
        self._echo(line, color, nl=True)

    # --- Input ---

    def get_string(self, prompt: str) -> str | None:
        """Prompt and return the next input line, or ``None`` at end of input."""
        self._echo(prompt, self.prompt_color, nl=False)
        return self._read_line()

    def get_number(self, prompt: str) -> float:
        """Prompt until a number is entered.

        Returns:
            float: The parsed number; ``nan`` at end of input or, when not
            persistent, after the first invalid entry.
        """
        while True:
            self._echo(prompt, self.prompt_color, nl=False)
            raw = self._read_line()
            if raw is None:
                return math.nan
            try:
                return float(raw.strip())
            except ValueError:
                self._echo(f"'{raw}' is not a valid number.", ConsoleColor.RED, nl=True)
                if not self.be_persistent:
                    self._echo("Defaulting to NaN.", ConsoleColor.RED, nl=True)
                    return math.nan

    def get_selection(self, prompt: str, options: Mapping[str, object]) -> str | None:
        """List ``options`` and prompt until one of their keys is entered.

        Keys match case-insensitively; the canonical key is returned.
        """
        if not options:
            return None
        self._list_options(options)
        while True:
            self._echo(prompt, self.prompt_color, nl=False)
            raw = self._read_line()
            if raw is None:
                return None
            key = _match_key(options, raw)
            if key is not None:
                return key
            self._echo(f"'{raw}' is not one of the options above.", ConsoleColor.RED, nl=True)
            if not self.be_persistent:
                self._echo("Defaulting to first option.", ConsoleColor.RED, nl=True)
                return next(iter(options))

    def get_selection_ignorable(self, prompt: str, options: Mapping[str, object]) -> str | None:
        """List ``options`` and prompt once; anything but a key declines (``None``)."""
        self._list_options(options)
        self._echo(prompt, self.prompt_color, nl=False)
        raw = self._read_line()
        if raw is None:
            return None
        return _match_key(options, raw)

    # --- Internals ---

    def _list_options(self, options: Mapping[str, object]) -> None:
        for key, value in options.items():
            self._echo(f"  [{key}]: {value}", self.prompt_color, nl=True)

    def _echo(self, text: str, color: ConsoleColor | None, *, nl: bool) -> None:
        if color is not None:
            self._color = color
        if self._color is not None:
            text = click.style(text, fg=self._color.fg)
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def _read_line(self) -> str | None:
        line = self.inp.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")


def _match_key(options: Mapping[str, object], raw: str) -> str | None:
    token = raw.strip().casefold()
    for key in options:
        if key.casefold() == token:
            return key
    return None
