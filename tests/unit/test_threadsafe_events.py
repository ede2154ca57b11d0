"""Tests for the ThreadSafeEventRegistry."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

from evemit.lib.events import EventRegistry
from evemit.lib.threadsafe_events import ThreadSafeEventRegistry


def run_in_threads(target, count=8):
    barrier = threading.Barrier(count)

    def worker():
        barrier.wait()
        target()

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    stuck = [thread.name for thread in threads if thread.is_alive()]
    assert not stuck, f"threads did not finish: {stuck}"


def test_is_an_event_registry():
    assert isinstance(ThreadSafeEventRegistry(), EventRegistry)


def test_once_listener_runs_once_across_threads():
    """Concurrent dispatches deliver a one-shot listener exactly once."""
    events = ThreadSafeEventRegistry()
    calls = []
    lock = threading.Lock()

    def listener():
        with lock:
            calls.append(threading.current_thread().name)

    events.register_once("x", listener)
    run_in_threads(lambda: events.dispatch("x"))

    assert len(calls) == 1
    assert events.listeners("x") == []


def test_concurrent_registration_keeps_every_listener():
    events = ThreadSafeEventRegistry()

    def register_many():
        for _ in range(100):
            events.register("x", MagicMock())

    run_in_threads(register_many)

    assert events.listener_count("x") == 800


def test_listener_can_use_registry_from_inside_dispatch():
    """Listeners run outside the lock, so they may call back into the registry."""
    events = ThreadSafeEventRegistry()
    late = MagicMock()
    result = {}

    def listener():
        events.register("x", late)
        worker = threading.Thread(target=lambda: result.update(count=events.listener_count("x")))
        worker.start()
        worker.join(timeout=5)
        result["worker_alive"] = worker.is_alive()

    events.register("x", listener)
    events.dispatch("x")

    assert result == {"count": 2, "worker_alive": False}
    late.assert_not_called()


def test_off_alias_is_locked():
    events = ThreadSafeEventRegistry()
    listener = MagicMock()

    events.on("x", listener)
    events.off("x", listener)

    assert events.emit("x") is False
    assert ThreadSafeEventRegistry.off is ThreadSafeEventRegistry.remove
