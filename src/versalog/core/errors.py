# topmark:header:start
#
#   project      : Versalog
#   file         : errors.py
#   file_relpath : src/versalog/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Versalog library.

Every exception derives from `VersalogError` and from the closest builtin
exception, so callers can catch either ``VersalogError`` or, for instance,
``ValueError``.

Configuration errors are contract violations detected at the call site and are
never retried. Formatting failures are not represented here: they are recovered
locally by falling back to the unformatted text.
"""

from __future__ import annotations


class VersalogError(Exception):
    """Base class for all Versalog errors."""


class ReservedLevelError(VersalogError, ValueError):
    """A threshold-only sentinel level was used as the level of a message."""


class UnmappedLevelError(VersalogError, LookupError):
    """No color (or other display attribute) is mapped for a level."""


class SelectionArgumentError(VersalogError, ValueError):
    """Malformed alternating key/value selection arguments."""


class HandlerNotConfiguredError(VersalogError, RuntimeError):
    """A strict input accessor was called while its handler slot is empty."""


class MissingColorError(VersalogError, TypeError):
    """A full-line write was requested without a color."""


class LoggerNotInitializedError(VersalogError, RuntimeError):
    """The convenience layer was used before a logger was installed."""


class ConfigError(VersalogError, ValueError):
    """Invalid configuration value (file, mapping or environment)."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
