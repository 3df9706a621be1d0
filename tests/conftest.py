"""Root pytest configuration for all tests."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from mdreader.config.models import ChangeNotification


class RecordingSink:
    """Notification sink that remembers everything it receives."""

    def __init__(self) -> None:
        self.notifications: list[ChangeNotification] = []
        self.received = threading.Event()

    def __call__(self, notification: ChangeNotification) -> None:
        self.notifications.append(notification)
        self.received.set()

    @property
    def contents(self) -> list[str]:
        return [n.content for n in self.notifications]

    def wait(self, timeout: float = 5.0) -> bool:
        """Wait for the next notification and re-arm."""
        ok = self.received.wait(timeout)
        self.received.clear()
        return ok


@pytest.fixture
def md_file(tmp_path: Path) -> Path:
    """A markdown file in its own directory."""
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\nfirst version\n", encoding="utf-8")
    return path


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
