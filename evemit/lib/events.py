"""Minimal event registry for decoupling components.

Listeners are called synchronously, in registration order, on the caller's
stack. Exceptions raised by a listener bubble up to whoever dispatched the
event.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


@dataclass(eq=False)
class ListenerEntry:
    """One registration of a listener.

    Entries compare by identity, so registering the same function twice
    yields two independent entries.
    """

    listener: Listener
    context: Any = None
    once: bool = False
    # Set once the entry has left its event's listener list
    removed: bool = field(default=False, repr=False)

    def matches(self, listener: Listener) -> bool:
        """Check whether this entry was registered with the given listener."""
        if self.listener is listener:
            return True
        # Every attribute access creates a new bound method object
        if inspect.ismethod(self.listener) and inspect.ismethod(listener):
            return (
                self.listener.__func__ is listener.__func__
                and self.listener.__self__ is listener.__self__
            )
        return False

    def invoke(self, args: tuple, kwargs: dict[str, Any]) -> Any:
        if self.context is None:
            return self.listener(*args, **kwargs)
        return self.listener(self.context, *args, **kwargs)


class EventRegistry:
    """Named-event listener registry with synchronous dispatch.

    Every instance owns its own mapping; there is no shared default registry.
    An event name stays mapped only while it has at least one listener.
    """

    def __init__(self) -> None:
        self._events: dict[str, list[ListenerEntry]] = {}

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}={len(entries)}" for name, entries in self._events.items())
        return f"{type(self).__name__}({counts})"

    def register(self, event_name: str, listener: Listener, context: Any = None) -> EventRegistry:
        """Register a listener for an event.

        Args:
            event_name: Event name.
            listener: Callable invoked on every dispatch of the event.
            context: Optional receiver passed as the first argument, like ``self``.

        Returns:
            The registry itself, for chaining.
        """
        return self._add(event_name, ListenerEntry(listener, context, once=False))

    def register_once(
        self, event_name: str, listener: Listener, context: Any = None
    ) -> EventRegistry:
        """Register a listener that is removed right before its first invocation."""
        return self._add(event_name, ListenerEntry(listener, context, once=True))

    def _add(self, event_name: str, entry: ListenerEntry) -> EventRegistry:
        if not callable(entry.listener):
            raise TypeError(f"Listener for '{event_name}' is not callable: {entry.listener!r}")
        if event_name not in self._events:
            self._events[event_name] = []
        self._events[event_name].append(entry)
        logger.debug(
            f"Registered {'one-shot ' if entry.once else ''}listener {entry.listener!r} "
            f"for event '{event_name}'"
        )
        return self

    def dispatch(self, event_name: str, *args: Any, **kwargs: Any) -> bool:
        """Call every listener registered for this event, in registration order.

        Iterates over the listeners registered when the dispatch started.
        Listeners added during the dispatch run from the next one on, and
        listeners removed during the dispatch are skipped.

        Returns:
            False if the event has no listeners, True otherwise, even if every
            listener was skipped.
        """
        snapshot = self._snapshot(event_name)
        if snapshot is None:
            logger.debug(f"Dispatching '{event_name}' with no listeners registered")
            return False

        for entry in snapshot:
            if self._claim(event_name, entry):
                entry.invoke(args, kwargs)
        return True

    def _snapshot(self, event_name: str) -> list[ListenerEntry] | None:
        entries = self._events.get(event_name)
        if entries is None:
            return None
        return list(entries)

    def _claim(self, event_name: str, entry: ListenerEntry) -> bool:
        """Decide whether a snapshot entry still runs, consuming it if one-shot."""
        if entry.removed:
            return False
        if entry.once:
            entry.removed = True
            entries = self._events[event_name]
            entries.remove(entry)
            if not entries:
                del self._events[event_name]
            logger.debug(f"Consumed one-shot listener {entry.listener!r} for '{event_name}'")
        return True

    def remove(self, event_name: str, listener: Listener) -> EventRegistry:
        """Remove every registration of a listener for an event."""
        entries = self._events.get(event_name)
        if entries is None:
            return self
        kept = []
        for entry in entries:
            if entry.matches(listener):
                entry.removed = True
            else:
                kept.append(entry)
        if len(kept) == len(entries):
            return self
        logger.debug(
            f"Removed {len(entries) - len(kept)} registration(s) of {listener!r} "
            f"from '{event_name}'"
        )
        if kept:
            entries[:] = kept
        else:
            del self._events[event_name]
        return self

    def clear(self, event_name: str | None = None) -> EventRegistry:
        """Remove all listeners of one event, or every event when no name is given."""
        if event_name is None:
            dropped = list(self._events.values())
            self._events.clear()
        else:
            dropped = [self._events.pop(event_name, [])]
        for entries in dropped:
            for entry in entries:
                entry.removed = True
        return self

    def listeners(self, event_name: str | None = None) -> list[Listener]:
        """Get a copy of the registered listeners.

        Args:
            event_name: Event to list. If omitted, listeners of all events are
                returned, grouped by event in registration order.
        """
        if event_name is not None:
            return [entry.listener for entry in self._events.get(event_name, [])]
        return [entry.listener for entries in self._events.values() for entry in entries]

    def listener_count(self, event_name: str | None = None) -> int:
        if event_name is not None:
            return len(self._events.get(event_name, []))
        return sum(len(entries) for entries in self._events.values())

    @property
    def events(self) -> dict[str, list[Listener]]:
        """Copy of the whole registry as ``{event_name: [listeners]}``."""
        return {
            name: [entry.listener for entry in entries] for name, entries in self._events.items()
        }

    # Short names, matching the usual emitter vocabulary
    on = register
    once = register_once
    emit = dispatch
    off = remove
