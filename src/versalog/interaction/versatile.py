# topmark:header:start
#
#   project      : Versalog
#   file         : versatile.py
#   file_relpath : src/versalog/interaction/versatile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decoupled user interaction: output, prompts and selections.

`VersatileIO` lets library code write colored lines, ask for strings or numbers
and offer selections without knowing whether a terminal, a GUI or a test double
is on the other end. A *handler* (see
`versalog.interaction.handler.VersatileHandlerBase`) fills the slots.

Unconfigured slots degrade gracefully:

- output operations are silent no-ops;
- `VersatileIO.get_string`, `VersatileIO.try_get_number` and the selection
  accessors return ``None``;
- `VersatileIO.get_number` is the one strict accessor: its return type has no
  "no value" case, so it raises `HandlerNotConfiguredError`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, cast

from versalog.config.logging import get_logger
from versalog.core.errors import (
    HandlerNotConfiguredError,
    MissingColorError,
    SelectionArgumentError,
)
from versalog.core.events import EventHook
from versalog.core.formatting import format_best_effort
from versalog.core.levels import LogLevel
from versalog.interaction.colors import ConsoleColor
from versalog.interaction.markup import encode_colors, scan

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from versalog.config.logging import VersalogLogger
    from versalog.interaction.protocols import VersatileHandler

logger: VersalogLogger = get_logger(__name__)

LineCallback = Callable[[str, ConsoleColor], None]
PartCallback = Callable[[str, Optional[ConsoleColor]], None]
StringInput = Callable[[str], Optional[str]]
NumberInput = Callable[[str], float]
SelectionInput = Callable[[str, "Mapping[str, object]"], Optional[str]]

DEFAULT_LEVEL_COLORS: Mapping[LogLevel, ConsoleColor] = {
    LogLevel.DEBUG: ConsoleColor.DARK_GRAY,
    LogLevel.INFO: ConsoleColor.GRAY,
    LogLevel.SUCCESS: ConsoleColor.GREEN,
    LogLevel.WARNING: ConsoleColor.YELLOW,
    LogLevel.ERROR: ConsoleColor.RED,
    LogLevel.FATAL: ConsoleColor.DARK_RED,
    LogLevel.INTERFACE: ConsoleColor.BLUE,
}


class InteractionType(Enum):
    """Kinds of interaction dispatched by `VersatileIO.interact`."""

    LOG_PART = "log-part"
    LOG_LINE = "log-line"
    INPUT_STRING = "input-string"
    INPUT_NUMBER = "input-number"
    SELECTION = "selection"
    OPTIONAL_SELECTION = "optional-selection"


class VersatileIO:
    """Routing table between call sites and a user interaction handler.

    Attributes:
        on_log_line (EventHook[LineCallback]): Observers for full lines.
        on_log_part (EventHook[PartCallback]): Observers for partial output.
        on_get_string (StringInput | None): Source of free text input.
        on_get_number (NumberInput | None): Source of numeric input.
        on_get_selection (SelectionInput | None): Strict selection prompt.
        on_get_ignorable_selection (SelectionInput | None): Selection the user may skip.
        level_colors (dict[LogLevel, ConsoleColor]): Color per level for
            `write_line_level`; levels without an entry are not written.
        min_log_level (LogLevel): Lines below this level are dropped.
        current_handler (VersatileHandler | None): Last handler installed by `set_handler`.
    """

    def __init__(
        self,
        level_colors: Mapping[LogLevel, ConsoleColor] | None = None,
        min_log_level: LogLevel = LogLevel.INFO,
    ) -> None:
        self.on_log_line: EventHook[LineCallback] = EventHook()
        self.on_log_part: EventHook[PartCallback] = EventHook()
        self.on_get_string: StringInput | None = None
        self.on_get_number: NumberInput | None = None
        self.on_get_selection: SelectionInput | None = None
        self.on_get_ignorable_selection: SelectionInput | None = None
        self.current_handler: VersatileHandler | None = None
        self.level_colors: dict[LogLevel, ConsoleColor] = {}
        self.min_log_level: LogLevel = LogLevel.INFO
        self.initialize_levels(level_colors)
        self.min_log_level = min_log_level

    # --- Configuration ---

    def initialize_levels(
        self, alternate_colors: Mapping[LogLevel, ConsoleColor] | None = None
    ) -> None:
        """Reset the level color table and the minimum level (``INFO``).

        Args:
            alternate_colors (Mapping[LogLevel, ConsoleColor] | None): Replacement table;
                the default table is used when ``None``.
        """
        source = DEFAULT_LEVEL_COLORS if alternate_colors is None else alternate_colors
        self.level_colors = dict(source)
        self.min_log_level = LogLevel.INFO

    def set_handler(self, handler: VersatileHandler, *, message: bool = True) -> None:
        """Install ``handler`` into every slot.

        Args:
            handler (VersatileHandler): Handler to install.
            message (bool): Emit a debug line once the handler is set.
        """
        handler.install(self)
        self.current_handler = handler
        logger.debug("versatile handler set: %s", type(handler).__name__)
        if message:
            self.debug("VersatileIO handler set.")

    # --- Output ---

    def write_line(self, text: str = "", color: ConsoleColor = ConsoleColor.WHITE) -> None:
        """Write a full line (the newline is added by the sink)."""
        if self.on_log_line:
            self.on_log_line.fire(text, color)

    def write(self, text: str, color: ConsoleColor | None = None) -> None:
        """Write text without a newline; ``color=None`` keeps the last active color."""
        if self.on_log_part:
            self.on_log_part.fire(text, color)

    def write_line_level(self, text: str, level: LogLevel, *args: object) -> None:
        """Write a line colored for ``level``.

        Dropped silently when ``level`` is below `min_log_level` or has no entry
        in `level_colors`. Formatting is best-effort.
        """
        if level < self.min_log_level:
            return
        color = self.level_colors.get(level)
        if color is None:
            return
        self.write_line(format_best_effort(text, args), color)

    def debug(self, text: str, *args: object) -> None:
        """Write a line at ``DEBUG``."""
        self.write_line_level(text, LogLevel.DEBUG, *args)

    def info(self, text: str, *args: object) -> None:
        """Write a line at ``INFO``."""
        self.write_line_level(text, LogLevel.INFO, *args)

    def success(self, text: str, *args: object) -> None:
        """Write a line at ``SUCCESS``."""
        self.write_line_level(text, LogLevel.SUCCESS, *args)

    def warning(self, text: str, *args: object) -> None:
        """Write a line at ``WARNING``."""
        self.write_line_level(text, LogLevel.WARNING, *args)

    def error(self, text: str, *args: object) -> None:
        """Write a line at ``ERROR``."""
        self.write_line_level(text, LogLevel.ERROR, *args)

    def fatal(self, text: str, *args: object) -> None:
        """Write a line at ``FATAL``."""
        self.write_line_level(text, LogLevel.FATAL, *args)

    def interface(self, text: str, *args: object) -> None:
        """Write a line at ``INTERFACE``."""
        self.write_line_level(text, LogLevel.INTERFACE, *args)

    def write_complex(self, text: str, escape: str, *colors: ConsoleColor) -> None:
        """Write a line containing inline color markup.

        When ``colors`` are given, ``{0}``, ``{1}``, ... in ``text`` are first
        replaced with the escape-encoded codes of those colors, so
        ``write_complex("{0}ok{1} done", "&", GREEN, GRAY)`` is equivalent to
        ``write_complex("&Aok&7 done", "&")``.

        Args:
            text (str): Markup text (see `versalog.interaction.markup`).
            escape (str): Single escape character; there is no default.
            *colors (ConsoleColor): Optional colors for positional slots.
        """
        if colors:
            text = encode_colors(text, escape, colors)
        for segment in scan(text, escape):
            self.write(segment.text, segment.color)
        self.write_line()

    # --- Input ---

    def get_string(self, prompt: str) -> str | None:
        """Ask for a string; ``None`` when no handler is configured."""
        if self.on_get_string is None:
            return None
        return self.on_get_string(prompt)

    def try_get_number(self, prompt: str) -> float | None:
        """Ask for a number; ``None`` when no handler is configured."""
        if self.on_get_number is None:
            return None
        return self.on_get_number(prompt)

    def get_number(self, prompt: str) -> float:
        """Ask for a number; a configured handler is required.

        Raises:
            HandlerNotConfiguredError: If `on_get_number` was never set.
        """
        value = self.try_get_number(prompt)
        if value is None:
            raise HandlerNotConfiguredError("Slot on_get_number was never set.")
        return value

    def get_selection(
        self,
        prompt: str,
        options: Mapping[str, object],
        ignorable: bool = False,
    ) -> str | None:
        """Let the user pick one of ``options``.

        Args:
            prompt (str): Prompt shown after the options are listed.
            options (Mapping[str, object]): Input codes mapped to display values, in order.
            ignorable (bool): Use the ignorable slot, allowing the user to decline.

        Returns:
            str | None: The chosen key; ``None`` if declined or unconfigured.
        """
        slot = self.on_get_ignorable_selection if ignorable else self.on_get_selection
        if slot is None:
            return None
        return slot(prompt, dict(options))

    def get_selection_index(
        self,
        prompt: str,
        options: Sequence[object],
        ignorable: bool = False,
    ) -> int | None:
        """Let the user pick an item of ``options``, keyed ``"0"``, ``"1"``, ...

        Returns:
            int | None: Index of the chosen item; ``None`` if declined or unconfigured.
        """
        key = self.get_selection(prompt, _index_keyed(options), ignorable)
        if key is None:
            return None
        return int(key)

    def get_selection_args(
        self,
        prompt: str,
        ignorable: bool,
        *args: object,
        options: Sequence[object] = (),
    ) -> str | None:
        """Selection from index-keyed ``options`` plus alternating key/value ``args``.

        Example:
            ``io.get_selection_args("Pick: ", False, "y", "Yes", "n", "No")``

        Raises:
            SelectionArgumentError: If an odd-position argument (1st, 3rd, ...)
                is not a ``str`` key, if a key repeats, or if no options result.
        """
        choices = _index_keyed(options)
        key: str = ""
        for pos, item in enumerate(args):
            if pos % 2 == 0:
                if not isinstance(item, str):
                    raise SelectionArgumentError(
                        f"Every odd-numbered item must be a string key, got {item!r}."
                    )
                if item in choices:
                    raise SelectionArgumentError(f"Duplicate option key {item!r}.")
                key = item
            else:
                choices[key] = item

        if not choices:
            raise SelectionArgumentError("No options were given to select from.")

        return self.get_selection(prompt, choices, ignorable)

    # --- Dispatch ---

    def interact(
        self,
        kind: InteractionType,
        text: str,
        color: ConsoleColor | None = None,
        *info: object,
    ) -> object:
        """Perform one interaction of type ``kind``.

        Args:
            kind (InteractionType): What to do.
            text (str): Output text, or the prompt for input interactions.
            color (ConsoleColor | None): Output color; mandatory for ``LOG_LINE``,
                ignored by input interactions.
            *info (object): Alternating key/value options for selections.

        Returns:
            object: The input result (``str``, ``float`` or ``None``); ``None`` for output.

        Raises:
            MissingColorError: If ``kind`` is ``LOG_LINE`` and ``color`` is ``None``.
        """
        if kind is InteractionType.LOG_LINE and color is None:
            raise MissingColorError("Argument color cannot be None if kind is LOG_LINE.")

        if kind is InteractionType.LOG_PART:
            self.write(text, color)
            return None
        if kind is InteractionType.LOG_LINE:
            self.write_line(text, cast("ConsoleColor", color))
            return None
        if kind is InteractionType.INPUT_STRING:
            return self.get_string(text)
        if kind is InteractionType.INPUT_NUMBER:
            return self.try_get_number(text)
        if kind is InteractionType.SELECTION:
            return self.get_selection_args(text, False, *info)
        if kind is InteractionType.OPTIONAL_SELECTION:
            return self.get_selection_args(text, True, *info)
        return None


def _index_keyed(options: Sequence[object]) -> dict[str, object]:
    return {str(idx): item for idx, item in enumerate(options)}

