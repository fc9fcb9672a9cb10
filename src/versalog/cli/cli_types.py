# topmark:header:start
#
#   project      : Versalog
#   file         : cli_types.py
#   file_relpath : src/versalog/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types for Versalog enums.

`EnumChoiceParam` converts a string to an Enum member by its string value.
`LevelParam` and `ColorParam` delegate to `LogLevel.parse` and
`ConsoleColor.parse`, so CLI arguments accept the same tokens as the settings
file (names, aliases and numeric or hex codes).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

from versalog.core.levels import LogLevel
from versalog.interaction.colors import ConsoleColor

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


def _fail_noreturn(
    message: str,
    param: click.Parameter | None,
    ctx: click.Context | None,
) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        # Case-insensitive lookup by the enum's string value
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        _fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


class LevelParam(ParamTypeBase):
    """Click type for a `LogLevel` (``info``, ``warn``, ``3``, ...)."""

    name = "level"

    def __init__(self, *, allow_block: bool = False) -> None:
        self.allow_block = allow_block

    def convert(
        self,
        value: str | LogLevel | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> LogLevel | None:
        """Convert ``value`` to a `LogLevel`."""
        if value is None or isinstance(value, LogLevel):
            return value
        level = LogLevel.parse(value)
        if level is None or (not self.allow_block and not level.is_emittable):
            names = ", ".join(
                lvl.name.lower() for lvl in LogLevel if self.allow_block or lvl.is_emittable
            )
            _fail_noreturn(f"Invalid level '{value}'. Must be one of: {names}", param, ctx)
        return level


class ColorParam(ParamTypeBase):
    """Click type for a `ConsoleColor`, by name (``dark-red``) or hex code (``4``)."""

    name = "color"

    def convert(
        self,
        value: str | ConsoleColor | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> ConsoleColor | None:
        """Convert ``value`` to a `ConsoleColor`."""
        if value is None or isinstance(value, ConsoleColor):
            return value
        color = ConsoleColor.parse(value)
        if color is None:
            _fail_noreturn(f"Invalid color '{value}'.", param, ctx)
        return color
