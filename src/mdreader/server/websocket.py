"""WebSocket connection manager for live reload."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

from fastapi import WebSocket, WebSocketDisconnect

from mdreader.config.models import ChangeNotification
from mdreader.renderer import MarkdownRenderer, extract_title

if TYPE_CHECKING:
    from concurrent.futures import Future

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Tracks viewer pages and pushes change notifications to them.

    ``notify_threadsafe`` is the notification sink handed to the
    ``ChangeWatcher``; it runs on the watcher thread and hops onto the
    server event loop stored in ``loop``.
    """

    def __init__(self, renderer: MarkdownRenderer | None = None) -> None:
        self._connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()
        self.renderer = renderer
        self.loop: asyncio.AbstractEventLoop | None = None

    async def connect(self, websocket: WebSocket) -> None:
        """Accept a new WebSocket connection."""
        await websocket.accept()
        async with self._lock:
            self._connections.add(websocket)
        logger.debug(f"Viewer connected ({len(self._connections)} total)")

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a WebSocket connection."""
        async with self._lock:
            self._connections.discard(websocket)
        logger.debug(f"Viewer disconnected ({len(self._connections)} total)")

    async def broadcast(self, message: dict[str, Any]) -> None:
        """Send a message to every connected client, dropping dead ones."""
        async with self._lock:
            connections = self._connections.copy()

        dead_connections: list[WebSocket] = []
        for websocket in connections:
            try:
                await websocket.send_json(message)
            except Exception:
                dead_connections.append(websocket)

        if dead_connections:
            async with self._lock:
                for ws in dead_connections:
                    self._connections.discard(ws)
            logger.debug(f"Dropped {len(dead_connections)} dead connections")

    def build_message(self, notification: ChangeNotification) -> dict[str, Any]:
        """Serialize a notification, adding rendered HTML when a renderer is set."""
        message = notification.to_message()
        if self.renderer is not None:
            document = self.renderer.render_document(notification.content)
            message["html"] = document.html
            message["toc"] = document.toc
            message["title"] = extract_title(
                notification.content, notification.file_path.stem
            )
        return message

    async def send_change(self, notification: ChangeNotification) -> None:
        """Push a change notification to all clients."""
        await self.broadcast(self.build_message(notification))

    def notify_threadsafe(self, notification: ChangeNotification) -> None:
        """Schedule ``send_change`` on the server loop from another thread."""
        loop = self.loop
        if loop is None or not loop.is_running():
            logger.warning("Cannot push change - event loop unavailable or not running")
            return

        future: Future[None] = asyncio.run_coroutine_threadsafe(
            self.send_change(notification), loop
        )
        try:
            # Wait briefly to ensure it's delivered
            future.result(timeout=0.5)
            logger.debug(f"Pushed change to {self.get_connection_count()} viewers")
        except Exception as e:
            logger.error(f"Failed to push change notification: {e}")

    def get_connection_count(self) -> int:
        """Get the number of active connections."""
        return len(self._connections)

    async def close_all(self, reason: str = "Server shutting down") -> None:
        """Close all WebSocket connections gracefully."""
        async with self._lock:
            connections = list(self._connections)
            self._connections.clear()

        for websocket in connections:
            with contextlib.suppress(Exception):
                await websocket.close(code=1001, reason=reason)
        logger.debug(f"Closed {len(connections)} viewer connections")


async def websocket_endpoint(websocket: WebSocket, manager: ConnectionManager) -> None:
    """Keep a viewer connection open until the client goes away."""
    await manager.connect(websocket)
    try:
        while True:
            # Clients don't send anything meaningful; reading detects disconnects
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)
