"""FastAPI application factory."""

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from mdreader import __version__
from mdreader.config.models import ViewerConfig
from mdreader.reader import ContentReader, window_title
from mdreader.renderer import MarkdownRenderer, extract_title
from mdreader.server.dependencies import host_allowed
from mdreader.server.routers.v1 import api, ws
from mdreader.server.websocket import ConnectionManager
from mdreader.watcher import ChangeWatcher

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline'; img-src 'self' data: https:; font-src 'self' data:; "
    "connect-src 'self' ws: wss:"
)


def create_app(config: ViewerConfig) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        config: Viewer configuration; ``file_path`` must already be resolved

    Returns:
        Configured FastAPI app. The change watcher, if reload is enabled, is
        available as ``app.state.watcher`` and started by the app lifespan.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Handle application lifespan events."""
        # Startup: store event loop and start file watcher
        app.state.ws_manager.loop = asyncio.get_running_loop()

        if app.state.watcher:
            app.state.watcher.start()

        yield

        # Shutdown: stop file watcher
        if app.state.watcher:
            app.state.watcher.stop()
        await app.state.ws_manager.close_all()

    app = FastAPI(
        title="md-reader",
        description="Single-file Markdown viewer with live reload",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.reader = ContentReader(config.file_path)
    app.state.renderer = MarkdownRenderer()
    app.state.ws_manager = ConnectionManager(renderer=app.state.renderer)
    app.state.watcher = None

    if config.reload_enabled:
        app.state.watcher = ChangeWatcher(
            file_path=config.file_path,
            sink=app.state.ws_manager.notify_threadsafe,
            debounce_ms=config.debounce_ms,
            reader=app.state.reader,
        )

    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):  # type: ignore
        if not host_allowed(config, request.url.hostname):
            logger.warning(f"Rejected request with Host {request.headers.get('host')!r}")
            return PlainTextResponse("Forbidden", status_code=403)

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Content-Security-Policy"] = CONTENT_SECURITY_POLICY

        if "text/html" in response.headers.get("content-type", ""):
            # HTML pages: no cache (always fresh)
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"

        return response

    app.include_router(api.router)
    app.include_router(ws.router)

    @app.get("/", response_class=HTMLResponse)
    async def root(request: Request) -> Response:
        """Serve the viewer page."""
        file_path = app.state.config.file_path
        content, error = app.state.reader.read_or_error()

        html = toc = ""
        title = file_path.stem
        if content is not None:
            document = app.state.renderer.render_document(content)
            html, toc = document.html, document.toc
            title = extract_title(content, file_path.stem)

        return app.state.templates.TemplateResponse(
            request=request,
            name="viewer.html",
            context={
                "filename": file_path.name,
                "window_title": window_title(file_path),
                "title": title,
                "content": html,
                "toc": toc,
                "error": error,
                "reload_enabled": app.state.config.reload_enabled,
                "theme": app.state.config.theme,
            },
            status_code=200 if error is None else 500,
        )

    return app
