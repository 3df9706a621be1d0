"""Debounce clock shared by event deliveries."""

import threading
import time
from typing import Callable

from mdreader.config.settings import DEBOUNCE_DELAY_SECONDS


def should_accept(last_accepted: float, now: float, window: float) -> bool:
    """Accept when at least ``window`` seconds passed since the last acceptance."""
    return now - last_accepted >= window


class DebounceClock:
    """
    Timestamp of the last accepted event, guarded by a lock.

    The window is measured from the previous *acceptance*, not from the
    previous raw event, so a sustained burst cannot starve acceptance.
    """

    def __init__(
        self,
        window_seconds: float = DEBOUNCE_DELAY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        # Older than any window so the first event is always accepted
        self._last_accepted = float("-inf")

    @property
    def last_accepted(self) -> float:
        with self._lock:
            return self._last_accepted

    def try_accept(self, now: float | None = None) -> bool:
        """
        Record ``now`` as the last acceptance if the window has elapsed.

        Args:
            now: Event time; read from the clock when omitted

        Returns:
            True if the event was accepted, False if it was debounced
        """
        with self._lock:
            if now is None:
                now = self._clock()
            if not should_accept(self._last_accepted, now, self.window_seconds):
                return False
            self._last_accepted = now
            return True
