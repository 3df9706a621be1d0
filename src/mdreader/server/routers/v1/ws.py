"""WebSocket router for live reload functionality.

This router handles the WebSocket endpoint for pushing change
notifications to connected viewer pages.
"""

import logging

from fastapi import APIRouter, Depends, WebSocket, status

from mdreader.config.models import ViewerConfig
from mdreader.server.dependencies import get_config, get_ws_manager, host_allowed
from mdreader.server.websocket import ConnectionManager, websocket_endpoint

logger = logging.getLogger(__name__)

router = APIRouter(tags=["websocket"])


@router.websocket("/ws")
async def websocket_route(
    websocket: WebSocket,
    config: ViewerConfig = Depends(get_config),
    manager: ConnectionManager = Depends(get_ws_manager),
) -> None:
    """WebSocket endpoint for live reload notifications.

    Viewer pages connect to this endpoint to receive ``file-changed``
    messages carrying the new content of the watched file. Upgrades from a
    foreign Host are closed before the handshake completes.

    Args:
        websocket: WebSocket connection
        config: Viewer configuration (injected)
        manager: WebSocket connection manager (injected)
    """
    if not host_allowed(config, websocket.url.hostname):
        logger.warning(f"Rejected WebSocket with Host {websocket.headers.get('host')!r}")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket_endpoint(websocket, manager)
