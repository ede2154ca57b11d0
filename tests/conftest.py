"""Pytest fixtures for evemit tests."""

import pytest

from evemit.lib.events import EventRegistry
from evemit.lib.threadsafe_events import ThreadSafeEventRegistry


def never_called(*args, **kwargs):
    raise AssertionError("'never-called' event was dispatched")


@pytest.fixture(params=[EventRegistry, ThreadSafeEventRegistry], ids=["plain", "threadsafe"])
def events(request):
    """Create a registry with one listener that must never run.

    Runs each test against both registry implementations.
    """
    registry = request.param()
    registry.register("never-called", never_called)
    return registry
