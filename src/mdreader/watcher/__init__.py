"""File system watching components for md-reader."""

from .debounce import DebounceClock, should_accept
from .events import classify_event, is_content_event
from .observer import ChangeWatcher, DebouncedEventHandler, NotificationSink

__all__ = [
    "ChangeWatcher",
    "DebounceClock",
    "DebouncedEventHandler",
    "NotificationSink",
    "classify_event",
    "is_content_event",
    "should_accept",
]
