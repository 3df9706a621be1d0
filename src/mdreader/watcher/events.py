"""Classification of raw filesystem events."""

import time
from pathlib import Path

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
)

from mdreader.config.models import EventKind, WatcherEvent

_KINDS: dict[str, EventKind] = {
    EVENT_TYPE_MODIFIED: EventKind.MODIFY,
    EVENT_TYPE_CREATED: EventKind.CREATE,
    EVENT_TYPE_DELETED: EventKind.REMOVE,
    EVENT_TYPE_MOVED: EventKind.RENAME,
    "opened": EventKind.ACCESS,
    "closed": EventKind.ACCESS,
    "closed_no_write": EventKind.ACCESS,
}

CONTENT_KINDS = frozenset({EventKind.MODIFY, EventKind.CREATE})


def classify_event(event_type: str) -> EventKind:
    """Map a watchdog event type string to an ``EventKind``."""
    return _KINDS.get(event_type, EventKind.OTHER)


def is_content_event(kind: EventKind) -> bool:
    """Only modify and create events signal new readable content."""
    return kind in CONTENT_KINDS


def from_watchdog(event: FileSystemEvent, timestamp: float | None = None) -> WatcherEvent:
    """Build a ``WatcherEvent`` from a raw watchdog event."""
    src_path = event.src_path
    if isinstance(src_path, bytes):
        src_path = src_path.decode("utf-8", errors="surrogateescape")
    return WatcherEvent(
        event_type=event.event_type,
        file_path=Path(src_path),
        timestamp=time.monotonic() if timestamp is None else timestamp,
        is_directory=event.is_directory,
    )
