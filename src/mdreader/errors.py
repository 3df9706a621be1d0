"""Error types for md-reader."""

from pathlib import Path


class MdReaderError(Exception):
    """Base class for md-reader errors."""

    pass


class NoPathProvided(MdReaderError):
    """Raised when no file argument was given."""

    def __init__(self) -> None:
        super().__init__("No file specified. Please provide a markdown file path.")


class FileNotFound(MdReaderError):
    """Raised when the resolved file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class ReadError(MdReaderError):
    """Raised when the target file cannot be read as text."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read file: {reason}")


class WatchSetupError(MdReaderError):
    """Raised when the directory monitor cannot be installed."""

    def __init__(self, directory: Path, reason: str) -> None:
        self.directory = directory
        self.reason = reason
        super().__init__(f"Failed to start watching {directory}: {reason}")


class WatchDeliveryError(MdReaderError):
    """Raised when a single filesystem event could not be handled."""

    pass
