"""API router for JSON endpoints.

This router serves the pull side of the viewer: the current raw content of
the watched file, its metadata, and a rendered version for clients that
want HTML instead of Markdown.
"""

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from mdreader.errors import ReadError
from mdreader.reader import ContentReader, window_title
from mdreader.renderer import MarkdownRenderer, extract_title
from mdreader.server.dependencies import get_content_reader, get_file_path, get_renderer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["api"])


def _read_or_500(reader: ContentReader) -> str:
    content, error = reader.read_or_error()
    if error is not None:
        raise HTTPException(status_code=500, detail=error)
    return content  # type: ignore[return-value]


@router.get("/api/content")
async def api_content(
    file_path: Path = Depends(get_file_path),
    reader: ContentReader = Depends(get_content_reader),
) -> dict[str, Any]:
    """Get the current content of the watched file.

    Args:
        file_path: Watched file (injected)
        reader: Content reader (injected)

    Returns:
        Absolute path and full text of the file

    Raises:
        HTTPException: 500 with a descriptive message if the read fails
    """
    content = _read_or_500(reader)
    return {"path": str(file_path), "content": content}


@router.get("/api/file")
async def api_file_metadata(
    file_path: Path = Depends(get_file_path),
    reader: ContentReader = Depends(get_content_reader),
) -> dict[str, Any]:
    """Get metadata for the watched file.

    Returns:
        File name, path, size, modified time, document title and window title

    Raises:
        HTTPException: If the file cannot be read
    """
    try:
        stat = file_path.stat()
        content = reader.read()
    except (OSError, ReadError) as e:
        logger.warning(f"Error getting metadata for {file_path}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "path": str(file_path),
        "name": file_path.name,
        "size": stat.st_size,
        "modified": stat.st_mtime,
        "title": extract_title(content, file_path.stem),
        "window_title": window_title(file_path),
    }


@router.get("/api/render")
async def api_render(
    file_path: Path = Depends(get_file_path),
    reader: ContentReader = Depends(get_content_reader),
    renderer: MarkdownRenderer = Depends(get_renderer),
) -> dict[str, Any]:
    """Get the current content rendered to HTML, with its TOC and title."""
    content = _read_or_500(reader)
    document = renderer.render_document(content)
    return {
        "path": str(file_path),
        "html": document.html,
        "toc": document.toc,
        "title": extract_title(content, file_path.stem),
    }


@router.get("/raw", response_class=Response)
async def get_raw_content(
    file_path: Path = Depends(get_file_path),
    reader: ContentReader = Depends(get_content_reader),
) -> Response:
    """Get raw markdown content of the watched file.

    Returns:
        Raw markdown content as text/plain

    Raises:
        HTTPException: If the file cannot be read
    """
    content = _read_or_500(reader)
    return Response(
        content=content,
        media_type="text/plain; charset=utf-8",
        headers={
            "Content-Disposition": f'inline; filename="{file_path.name}"',
            "X-Content-Type-Options": "nosniff",
        },
    )
