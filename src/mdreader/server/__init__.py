"""FastAPI server components for md-reader."""

from .app import create_app
from .websocket import ConnectionManager, websocket_endpoint

__all__ = ["create_app", "ConnectionManager", "websocket_endpoint"]
