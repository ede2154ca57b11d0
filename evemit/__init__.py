from evemit.config import ConfigType
from evemit.constants import PACKAGE
from evemit.lib.events import EventRegistry, ListenerEntry
from evemit.lib.logger import configure_logger, reset_logger
from evemit.lib.threadsafe_events import ThreadSafeEventRegistry
from evemit.version import __version__

VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    ConfigType.__name__,
    EventRegistry.__name__,
    ListenerEntry.__name__,
    ThreadSafeEventRegistry.__name__,
    configure_logger.__name__,
    reset_logger.__name__,
]
