# topmark:header:start
#
#   project      : Versalog
#   file         : events.py
#   file_relpath : src/versalog/core/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Log event record and a small ordered observer list.

`LogEvent` is the immutable ``(level, message)`` pair handed to every
subscriber of a `versalog.logger.logger.Logger`.

`EventHook` replaces multicast delegates: observers are kept in an explicit
list and invoked synchronously, in registration order, on the caller's thread.
Firing a hook with no observers is a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from versalog.core.levels import LogLevel

if TYPE_CHECKING:
    from collections.abc import Iterator

F = TypeVar("F", bound=Callable[..., object])


@dataclass(frozen=True)
class LogEvent:
    """A single emitted message.

    Attributes:
        level (LogLevel): Severity of the message.
        message (str): Fully formatted message text (including any prefix).
    """

    level: LogLevel
    message: str


class EventHook(Generic[F]):
    """Ordered list of observer callables.

    The same callable may be subscribed more than once; it is then invoked once
    per subscription. `unsubscribe` removes the most recent registration.

    Example:
        ```python
        hook: EventHook[Callable[[LogEvent], None]] = EventHook()
        hook += seen.append
        hook.fire(LogEvent(LogLevel.INFO, "hello"))
        ```
    """

    def __init__(self) -> None:
        self._observers: list[F] = []

    def subscribe(self, observer: F) -> F:
        """Append ``observer``; returns it so the method can be used as a decorator."""
        self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: F) -> bool:
        """Remove the last registration of ``observer``.

        Returns:
            bool: ``True`` if an observer was removed, ``False`` if it was not subscribed.
        """
        for idx in range(len(self._observers) - 1, -1, -1):
            if self._observers[idx] == observer:
                del self._observers[idx]
                return True
        return False

    def replace(self, observer: F) -> None:
        """Drop every observer and subscribe ``observer`` alone."""
        self._observers = [observer]

    def clear(self) -> None:
        """Remove all observers."""
        self._observers.clear()

    def fire(self, *args: object) -> None:
        """Invoke every observer with ``args``, in registration order."""
        # Snapshot so observers may (un)subscribe while being notified.
        for observer in tuple(self._observers):
            observer(*args)

    def __iadd__(self, observer: F) -> EventHook[F]:
        self.subscribe(observer)
        return self

    def __isub__(self, observer: F) -> EventHook[F]:
        self.unsubscribe(observer)
        return self

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return bool(self._observers)

    def __iter__(self) -> Iterator[F]:
        return iter(tuple(self._observers))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._observers)} observer(s))"
