"""Markdown rendering engine."""

import re
import threading
from dataclasses import dataclass
from functools import lru_cache

import markdown

from mdreader.config.models import RenderConfig

_TITLE_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def extract_title(content: str, fallback: str) -> str:
    """Return the first level-one heading, or ``fallback`` if there is none."""
    match = _TITLE_RE.search(content)
    return match.group(1).strip() if match else fallback


@dataclass(frozen=True)
class RenderedDocument:
    """HTML body and table of contents for one version of the file."""

    html: str
    toc: str


class MarkdownRenderer:
    """Renders Markdown to HTML with configured extensions."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer with configuration."""
        self.config = config or RenderConfig.default()
        self._md = self._create_markdown_instance()
        self._lock = threading.Lock()

    def _create_markdown_instance(self) -> markdown.Markdown:
        """Create configured markdown instance."""
        return markdown.Markdown(
            extensions=self.config.extensions,
            extension_configs=self.config.extension_configs,
        )

    @lru_cache(maxsize=32)
    def render_document(self, content: str) -> RenderedDocument:
        """
        Render Markdown content to HTML and extract the TOC.

        Args:
            content: Raw Markdown string

        Returns:
            Rendered HTML and TOC (empty when TOC is disabled)
        """
        with self._lock:
            # Reset the markdown instance for fresh render
            self._md.reset()
            html = self._md.convert(content)
            toc = getattr(self._md, "toc", "") if self.config.enable_toc else ""
        return RenderedDocument(html=html, toc=toc)

    def render(self, content: str) -> str:
        """Render Markdown content to HTML."""
        return self.render_document(content).html
