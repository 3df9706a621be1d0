"""FastAPI dependencies reading shared objects off the app state."""

from pathlib import Path

from starlette.requests import HTTPConnection

from mdreader.config.models import ViewerConfig
from mdreader.config.settings import ALLOWED_HOSTS
from mdreader.reader import ContentReader
from mdreader.renderer import MarkdownRenderer
from mdreader.server.websocket import ConnectionManager


def host_allowed(config: ViewerConfig, hostname: str | None) -> bool:
    """Reject foreign Host headers when bound to loopback (DNS rebinding)."""
    if config.host not in ALLOWED_HOSTS:
        return True
    return hostname in ALLOWED_HOSTS


def get_config(conn: HTTPConnection) -> ViewerConfig:
    return conn.app.state.config


def get_file_path(conn: HTTPConnection) -> Path:
    return conn.app.state.config.file_path


def get_content_reader(conn: HTTPConnection) -> ContentReader:
    return conn.app.state.reader


def get_renderer(conn: HTTPConnection) -> MarkdownRenderer:
    return conn.app.state.renderer


def get_ws_manager(conn: HTTPConnection) -> ConnectionManager:
    return conn.app.state.ws_manager
