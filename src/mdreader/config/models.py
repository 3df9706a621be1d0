"""Core data models for md-reader."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

# Valid theme names
VALID_THEMES = ["light", "dark"]

# Valid logging levels
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EventKind(str, Enum):
    """Classified kind of a raw filesystem event."""

    MODIFY = "modify"
    CREATE = "create"
    REMOVE = "remove"
    RENAME = "rename"
    ACCESS = "access"
    OTHER = "other"


@dataclass
class ViewerConfig:
    """Configuration for the viewer server."""

    host: str = "127.0.0.1"  # Bind address
    port: int = 8000  # Port number
    file_path: Path = field(default_factory=Path)  # Absolute path of the viewed file
    theme: str = "light"  # UI theme name
    open_browser: bool = True  # Auto-open browser on start
    reload_enabled: bool = True  # Enable live reload
    log_level: str = "INFO"  # Logging level
    debounce_ms: int = 100  # Minimum gap between accepted change events

    def validate(self) -> None:
        """Validate configuration values."""
        if not (1024 <= self.port <= 65535):
            raise ValueError("Port must be 1024-65535")
        if not self.file_path.is_absolute():
            raise ValueError(f"File path must be absolute: {self.file_path}")
        if not self.file_path.is_file():
            raise ValueError(f"File does not exist: {self.file_path}")
        if self.theme not in VALID_THEMES:
            raise ValueError(f"Invalid theme: {self.theme}")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
        if self.debounce_ms < 0:
            raise ValueError("Debounce window must not be negative")


@dataclass
class WatcherEvent:
    """Represents a file system event from the watcher."""

    event_type: str  # created, modified, deleted, moved, opened, closed
    file_path: Path  # Absolute path to affected entry
    timestamp: float  # Event timestamp (monotonic clock)
    is_directory: bool = False

    @property
    def kind(self) -> EventKind:
        """Classified kind of this event."""
        from mdreader.watcher.events import classify_event

        return classify_event(self.event_type)


@dataclass
class ChangeNotification:
    """Push message carrying the full new content of the watched file."""

    file_path: Path
    content: str
    timestamp: float

    def to_message(self) -> dict[str, Any]:
        """Serialize for the WebSocket channel."""
        return {
            "type": "file-changed",
            "path": str(self.file_path),
            "content": self.content,
            "timestamp": self.timestamp,
        }


@dataclass
class RenderConfig:
    """Configuration for Markdown renderer."""

    extensions: list[str] = field(default_factory=list)  # Markdown extensions to enable
    extension_configs: dict[str, Any] = field(
        default_factory=dict
    )  # Extension-specific settings
    enable_toc: bool = True  # Generate table of contents

    @classmethod
    def default(cls) -> "RenderConfig":
        """Create default configuration with GitHub-flavored Markdown support."""
        return cls(
            extensions=[
                # --- Core markdown extensions ---
                "markdown.extensions.abbr",
                "markdown.extensions.attr_list",
                "markdown.extensions.def_list",
                "markdown.extensions.footnotes",
                "markdown.extensions.sane_lists",
                "markdown.extensions.tables",
                "markdown.extensions.toc",
                # --- pymdownx extensions ---
                "pymdownx.highlight",
                "pymdownx.inlinehilite",
                "pymdownx.superfences",
                "pymdownx.tasklist",
                "pymdownx.tilde",
                "pymdownx.magiclink",
                # --- local extensions ---
                "mdreader.renderer.extensions",
            ],
            extension_configs={
                "markdown.extensions.toc": {
                    "permalink": True,
                    "baselevel": 1,
                },
                "pymdownx.tasklist": {
                    "custom_checkbox": True,
                },
                "pymdownx.magiclink": {
                    "hide_protocol": True,
                },
                "pymdownx.highlight": {
                    "anchor_linenums": False,
                    "use_pygments": True,
                    "pygments_lang_class": True,
                },
                "pymdownx.superfences": {
                    "custom_fences": [
                        {
                            "name": "mermaid",
                            "class": "mermaid",
                            "format": lambda src, *args, **kwargs: f'<div class="mermaid">{src}</div>',
                        }
                    ]
                },
            },
            enable_toc=True,
        )
