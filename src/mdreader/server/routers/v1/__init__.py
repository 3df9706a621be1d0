"""Versioned routers for the md-reader server."""

from . import api, ws

__all__ = ["api", "ws"]
