"""Event registry that can be shared between threads."""

from __future__ import annotations

from threading import RLock

from evemit.lib.events import EventRegistry, Listener, ListenerEntry


class ThreadSafeEventRegistry(EventRegistry):
    """EventRegistry guarded by a reentrant lock.

    The lock covers the mapping and its lists only. Listeners run outside of
    it, so they may register, remove or dispatch from any thread.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = RLock()

    def _add(self, event_name: str, entry: ListenerEntry) -> EventRegistry:
        with self._lock:
            return super()._add(event_name, entry)

    def _snapshot(self, event_name: str) -> list[ListenerEntry] | None:
        with self._lock:
            return super()._snapshot(event_name)

    def _claim(self, event_name: str, entry: ListenerEntry) -> bool:
        # Membership check and one-shot removal under a single acquisition
        with self._lock:
            return super()._claim(event_name, entry)

    def remove(self, event_name: str, listener: Listener) -> EventRegistry:
        with self._lock:
            return super().remove(event_name, listener)

    def clear(self, event_name: str | None = None) -> EventRegistry:
        with self._lock:
            return super().clear(event_name)

    def listeners(self, event_name: str | None = None) -> list[Listener]:
        with self._lock:
            return super().listeners(event_name)

    def listener_count(self, event_name: str | None = None) -> int:
        with self._lock:
            return super().listener_count(event_name)

    @property
    def events(self) -> dict[str, list[Listener]]:
        with self._lock:
            return super().events

    def __repr__(self) -> str:
        with self._lock:
            return super().__repr__()

    # on/once/emit already go through the locked hooks
    off = remove
