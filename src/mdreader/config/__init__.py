"""Configuration models and settings for md-reader."""

from mdreader.config.models import (
    ChangeNotification,
    EventKind,
    RenderConfig,
    ViewerConfig,
    WatcherEvent,
)

__all__ = ["ChangeNotification", "EventKind", "RenderConfig", "ViewerConfig", "WatcherEvent"]
