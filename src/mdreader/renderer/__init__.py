"""Markdown rendering for md-reader."""

from .engine import MarkdownRenderer, RenderedDocument, extract_title

__all__ = ["MarkdownRenderer", "RenderedDocument", "extract_title"]
