"""Application settings and configuration."""

import os
from pathlib import Path

from mdreader.config.models import VALID_THEMES, ViewerConfig

# Default settings
DEFAULT_HOST = os.getenv("MDREADER_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("MDREADER_PORT", "8000"))
DEFAULT_THEME = os.getenv("MDREADER_THEME", "light")
DEFAULT_LOG_LEVEL = os.getenv("MDREADER_LOG_LEVEL", "INFO")

APP_NAME = "md-reader"
WINDOW_TITLE_SUFFIX = f" — {APP_NAME}"

# Path resolution: how many directories (starting one included) to search
MAX_ANCESTOR_LEVELS = 4

# File size limits
MAX_FILE_SIZE_MB = 10
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024

# Debounce settings for file watcher
DEBOUNCE_DELAY_MS = 100
DEBOUNCE_DELAY_SECONDS = DEBOUNCE_DELAY_MS / 1000

# How long the watcher thread waits for the observer to come up
WATCH_SETUP_TIMEOUT = 5.0  # seconds

# Hosts accepted in the Host header
ALLOWED_HOSTS = ("localhost", "127.0.0.1")


def get_default_viewer_config(file_path: Path | None = None) -> ViewerConfig:
    """Get default viewer configuration."""
    return ViewerConfig(
        host=DEFAULT_HOST,
        port=DEFAULT_PORT,
        file_path=file_path or Path(),
        theme=DEFAULT_THEME,
        open_browser=True,
        reload_enabled=True,
        log_level=DEFAULT_LOG_LEVEL,
        debounce_ms=DEBOUNCE_DELAY_MS,
    )


__all__ = [
    "VALID_THEMES",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_THEME",
    "DEFAULT_LOG_LEVEL",
    "APP_NAME",
    "WINDOW_TITLE_SUFFIX",
    "MAX_ANCESTOR_LEVELS",
    "MAX_FILE_SIZE_BYTES",
    "DEBOUNCE_DELAY_MS",
    "DEBOUNCE_DELAY_SECONDS",
    "WATCH_SETUP_TIMEOUT",
    "ALLOWED_HOSTS",
    "get_default_viewer_config",
]
