# topmark:header:start
#
#   project      : Versalog
#   file         : formatting.py
#   file_relpath : src/versalog/core/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Positional template substitution (``"{0} of {1}"``).

Templates use `str.format` with positional arguments only. Formatting is
applied only when arguments are supplied, so messages containing literal
braces (dict reprs, JSON) pass through untouched when logged without args.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from versalog.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from versalog.config.logging import VersalogLogger

logger: VersalogLogger = get_logger(__name__)


def format_template(text: str, args: Sequence[object]) -> str:
    """Substitute ``args`` into ``text``; raise on a template mismatch.

    Args:
        text (str): Template with positional slots.
        args (Sequence[object]): Values for ``{0}``, ``{1}``, ...

    Returns:
        str: The formatted text, or ``text`` unchanged when ``args`` is empty.

    Raises:
        ValueError: Malformed template (e.g. unbalanced braces).
        IndexError: A slot refers to a missing argument.
        KeyError: A named slot was used.
    """
    if not args:
        return text
    return text.format(*args)


def format_best_effort(text: str, args: Sequence[object]) -> str:
    """Like `format_template` but fall back to ``text`` on any template mismatch."""
    try:
        return format_template(text, args)
    except (ValueError, IndexError, KeyError, AttributeError, TypeError) as exc:
        logger.trace("template %r not formatted (%s); using raw text", text, exc)
        return text
