"""Directory-level watching of the viewed file."""

import logging
import threading
import time
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from mdreader.config.models import ChangeNotification, WatcherEvent
from mdreader.config.settings import DEBOUNCE_DELAY_MS, WATCH_SETUP_TIMEOUT
from mdreader.errors import ReadError, WatchDeliveryError, WatchSetupError
from mdreader.reader import ContentReader
from mdreader.watcher.debounce import DebounceClock
from mdreader.watcher.events import from_watchdog, is_content_event

logger = logging.getLogger(__name__)

NotificationSink = Callable[[ChangeNotification], None]


class DebouncedEventHandler(FileSystemEventHandler):
    """Forwards every raw watchdog event to a ``ChangeWatcher``."""

    def __init__(self, watcher: "ChangeWatcher") -> None:
        super().__init__()
        self.watcher = watcher

    def on_any_event(self, event: FileSystemEvent) -> None:
        self.watcher.dispatch(event)


class ChangeWatcher:
    """
    Watches the parent directory of one file and pushes its new content.

    The directory is watched instead of the file so that editors which save
    by delete-and-recreate or rename-into-place keep being observed. Only
    modify and create events on the file or on the directory itself count,
    and at most one of them is accepted per debounce window. Each accepted
    event re-reads the file and hands a ``ChangeNotification`` to the sink;
    failed reads are dropped and the next event retries.
    """

    def __init__(
        self,
        file_path: Path,
        sink: NotificationSink,
        debounce_ms: int = DEBOUNCE_DELAY_MS,
        reader: ContentReader | None = None,
        clock: Callable[[], float] = time.monotonic,
        observer_factory: Callable[[], Observer] = Observer,
    ) -> None:
        self.file_path = file_path
        self.watch_dir = file_path.parent
        self.sink = sink
        self.reader = reader or ContentReader(file_path)
        self.debounce = DebounceClock(debounce_ms / 1000, clock)
        self._now = clock
        self._observer_factory = observer_factory
        self._observer: Observer | None = None
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._ready = threading.Event()
        self._setup_error: WatchSetupError | None = None

    @property
    def is_running(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and self._observer is not None
        )

    def concerns_target(self, path: Path) -> bool:
        """True for events on the target itself or on the watched directory.

        Rename-into-place saves can surface only as a modification of the
        directory, so directory events still count.
        """
        return path == self.watch_dir or path.name == self.file_path.name

    def process_event(self, event: WatcherEvent) -> ChangeNotification | None:
        """
        Filter, debounce and deliver one event.

        Args:
            event: Event with its delivery timestamp

        Returns:
            The notification handed to the sink, or None if the event was
            ignored or debounced, or the file could not be read
        """
        kind = event.kind
        if not is_content_event(kind):
            logger.debug(f"Ignoring {kind.value} event for {event.file_path}")
            return None

        if not self.concerns_target(event.file_path):
            logger.debug(f"Ignoring {kind.value} event for sibling {event.file_path.name}")
            return None

        if not self.debounce.try_accept(event.timestamp):
            logger.debug(f"Debounced {kind.value} event for {event.file_path}")
            return None

        try:
            content = self.reader.read()
        except ReadError as e:
            # The file may be mid-write or briefly absent; a later event retries
            logger.debug(f"Dropping change notification: {e.reason}")
            return None

        notification = ChangeNotification(
            file_path=self.file_path,
            content=content,
            timestamp=event.timestamp,
        )
        logger.info(f"File changed: {self.file_path}")
        self.sink(notification)
        return notification

    def dispatch(self, event: FileSystemEvent) -> None:
        """Handle a raw watchdog event without letting failures stop the observer."""
        try:
            self.process_event(from_watchdog(event, self._now()))
        except Exception as e:
            error = WatchDeliveryError(f"{event.event_type} {event.src_path!r}: {e}")
            logger.warning(f"Dropped filesystem event: {error}")

    def start(self) -> None:
        """
        Start watching in a background thread.

        Blocks until the observer is installed.

        Raises:
            WatchSetupError: If the directory cannot be watched
        """
        if self.is_running:
            return

        self._stop_event.clear()
        self._ready.clear()
        self._setup_error = None
        self._thread = threading.Thread(
            target=self._run, name="mdreader-watcher", daemon=True
        )
        self._thread.start()

        if not self._ready.wait(WATCH_SETUP_TIMEOUT):
            self.stop()
            raise WatchSetupError(self.watch_dir, "timed out waiting for the observer")
        if self._setup_error is not None:
            raise self._setup_error

    def stop(self, timeout: float | None = 5.0) -> None:
        """Signal the watcher thread to stop and wait for it."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        observer = self._observer_factory()
        try:
            if not self.watch_dir.is_dir():
                raise NotADirectoryError(f"{self.watch_dir} is not a directory")
            observer.schedule(
                DebouncedEventHandler(self), str(self.watch_dir), recursive=False
            )
            observer.start()
        except Exception as e:
            logger.error(f"Failed to start watching {self.watch_dir}: {e}")
            self._setup_error = WatchSetupError(self.watch_dir, str(e))
            self._ready.set()
            return

        self._observer = observer
        self._ready.set()
        logger.info(f"Watching {self.watch_dir} for changes to {self.file_path.name}")

        try:
            self._stop_event.wait()
        finally:
            observer.stop()
            observer.join()
            self._observer = None
            logger.debug(f"Stopped watching {self.watch_dir}")
