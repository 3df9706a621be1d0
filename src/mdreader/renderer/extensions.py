"""Custom Markdown extensions for md-reader."""

import re
from markdown import Extension
from markdown.postprocessors import Postprocessor


class ExternalLinkProcessor(Postprocessor):
    """Open external links outside the viewer tab."""

    pattern = re.compile(r'<a href="(https?://[^"]+)"')

    def run(self, text: str) -> str:
        """Add target and rel attributes to http(s) links."""
        return self.pattern.sub(r'<a href="\1" target="_blank" rel="noopener noreferrer"', text)


class ExternalLinkExtension(Extension):
    """Extension to handle external links."""

    def extendMarkdown(self, md):  # type: ignore
        """Register the postprocessor."""
        md.postprocessors.register(
            ExternalLinkProcessor(md),
            'external_links',
            5  # Priority
        )


def makeExtension(**kwargs):  # type: ignore
    """Create extension instance."""
    return ExternalLinkExtension(**kwargs)
