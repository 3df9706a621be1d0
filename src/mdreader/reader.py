"""On-demand reads of the viewed file."""

import logging
from pathlib import Path

from mdreader.config.settings import MAX_FILE_SIZE_BYTES, WINDOW_TITLE_SUFFIX
from mdreader.errors import ReadError

logger = logging.getLogger(__name__)


class ContentReader:
    """Reads the full text of a single file."""

    def __init__(self, file_path: Path, max_bytes: int = MAX_FILE_SIZE_BYTES) -> None:
        self.file_path = file_path
        self.max_bytes = max_bytes

    def read(self) -> str:
        """
        Read the file contents.

        Returns:
            Full file text decoded as UTF-8

        Raises:
            ReadError: If the file is missing, unreadable, too large or not text
        """
        try:
            size = self.file_path.stat().st_size
            if size > self.max_bytes:
                raise ReadError(
                    self.file_path, f"file is {size} bytes, limit is {self.max_bytes}"
                )
            return self.file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(self.file_path, str(e)) from e

    def read_or_error(self) -> tuple[str | None, str | None]:
        """Read for a pull query: ``(content, None)`` or ``(None, message)``."""
        try:
            return self.read(), None
        except ReadError as e:
            logger.warning(f"Pull query failed for {self.file_path}: {e.reason}")
            return None, str(e)


def window_title(file_path: Path) -> str:
    """Display title for the viewer window."""
    return f"{file_path.name or file_path}{WINDOW_TITLE_SUFFIX}"
