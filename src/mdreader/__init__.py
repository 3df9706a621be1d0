"""md-reader: single-file Markdown viewer with live reload."""

__version__ = "0.1.0"
__author__ = "md-reader contributors"
__license__ = "MIT"

from mdreader.config.models import (
    ChangeNotification,
    EventKind,
    RenderConfig,
    ViewerConfig,
    WatcherEvent,
)
from mdreader.errors import (
    FileNotFound,
    MdReaderError,
    NoPathProvided,
    ReadError,
    WatchDeliveryError,
    WatchSetupError,
)

__all__ = [
    "ChangeNotification",
    "EventKind",
    "RenderConfig",
    "ViewerConfig",
    "WatcherEvent",
    "MdReaderError",
    "NoPathProvided",
    "FileNotFound",
    "ReadError",
    "WatchSetupError",
    "WatchDeliveryError",
    "__version__",
]
