# topmark:header:start
#
#   project      : Versalog
#   file         : levels.py
#   file_relpath : src/versalog/core/levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity levels shared by the logger and the versatile I/O layer.

`LogLevel` is a totally ordered `IntEnum`: comparisons such as
``level >= threshold`` gate whether a message reaches a sink.

Two members are special:

- `LogLevel.INTERFACE` marks user-facing prompts. Lines logged at this level
  carry neither a timestamp nor a ``[LEVEL]`` tag.
- `LogLevel.BLOCK_ALL_LOGGING` is a threshold-only sentinel. Using it as a
  sink threshold suppresses that sink entirely; using it as the level of an
  actual message is a configuration error.
"""

from __future__ import annotations

from enum import IntEnum

from versalog.core.enum_mixins import enum_from_name, norm_token

# Alternative spellings accepted by `LogLevel.parse`.
_ALIASES: dict[str, str] = {
    "warn": "WARNING",
    "err": "ERROR",
    "critical": "FATAL",
    "prompt": "INTERFACE",
    "none": "BLOCK_ALL_LOGGING",
    "off": "BLOCK_ALL_LOGGING",
    "block": "BLOCK_ALL_LOGGING",
}


class LogLevel(IntEnum):
    """Ordered log severities.

    Attributes:
        DEBUG: Detailed diagnostics. Production code usually hides this level.
        INFO: Low-importance information with a neutral tone.
        SUCCESS: Reports an operation that completed successfully.
        WARNING: Something that may be a problem but is not failing yet.
        ERROR: An operation failed, or a handled exception is reported.
        FATAL: A severe failure that requires a restart or reset.
        INTERFACE: A prompt addressed to the user (no timestamp, no tag).
        BLOCK_ALL_LOGGING: Threshold-only sentinel; never a message level.
    """

    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5
    INTERFACE = 6
    BLOCK_ALL_LOGGING = 7

    @property
    def tag(self) -> str:
        """Upper-case label used inside the ``[TAG]`` line prefix."""
        return self.name

    @property
    def is_emittable(self) -> bool:
        """Whether messages may be logged at this level."""
        return self is not LogLevel.BLOCK_ALL_LOGGING

    @property
    def is_prefixed(self) -> bool:
        """Whether full lines at this level get a timestamp and tag prefix."""
        return self is not LogLevel.INTERFACE

    @classmethod
    def parse(cls, raw: str | None) -> LogLevel | None:
        """Parse a level name, case-insensitively.

        Matches member names (``"warning"``, ``"block-all-logging"``), a few
        aliases (``"warn"``, ``"critical"``, ``"off"``) and decimal values
        (``"3"``).

        Args:
            raw (str | None): Token to parse.

        Returns:
            LogLevel | None: The matching level, or ``None`` when unknown.
        """
        if raw is None:
            return None
        token: str = norm_token(raw)
        if token.isdigit():
            try:
                return cls(int(token))
            except ValueError:
                return None
        name: str = _ALIASES.get(token, token)
        return enum_from_name(cls, name, case_insensitive=True)


def emittable_levels() -> tuple[LogLevel, ...]:
    """Return all levels that may be used for actual messages, lowest first."""
    return tuple(level for level in LogLevel if level.is_emittable)
