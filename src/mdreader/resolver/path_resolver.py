"""Path resolution for the viewed file."""

from pathlib import Path

from mdreader.config.settings import MAX_ANCESTOR_LEVELS
from mdreader.errors import FileNotFound, NoPathProvided


def resolve_file_path(
    candidate: str | Path | None,
    cwd: Path,
    max_levels: int = MAX_ANCESTOR_LEVELS,
) -> Path:
    """
    Turn a user-supplied path into an absolute path.

    Relative paths are joined to ``cwd`` first. If that does not exist, the
    join is retried against each parent of ``cwd`` (``max_levels`` directories
    in total, ``cwd`` included). This covers launchers that start the process
    one or more levels below the directory the user typed the path from.

    Args:
        candidate: Path given on the command line, possibly empty
        cwd: Current working directory
        max_levels: Number of directories to try, starting with ``cwd``

    Returns:
        The canonical path of the first existing match, the candidate itself
        if it is absolute, or ``cwd / candidate`` when nothing matched

    Raises:
        NoPathProvided: If no candidate was given
    """
    if candidate is None or str(candidate) == "":
        raise NoPathProvided()

    requested = Path(candidate)
    if requested.is_absolute():
        return requested

    directory = cwd
    for _ in range(max_levels):
        try:
            return (directory / requested).resolve(strict=True)
        except (OSError, RuntimeError):
            pass

        if directory.parent == directory:
            break
        directory = directory.parent

    # Nothing matched: keep the cwd-based path so the error names what the user typed
    return cwd / requested


def require_existing(path: Path) -> Path:
    """
    Check that the resolved path names an existing file.

    Args:
        path: Path returned by ``resolve_file_path``

    Returns:
        The same path if it is an existing regular file

    Raises:
        FileNotFound: If nothing exists at ``path`` or it is a directory
    """
    if not path.is_file():
        raise FileNotFound(path)
    return path


def resolve_existing_file(candidate: str | Path | None, cwd: Path) -> Path:
    """Resolve ``candidate`` against ``cwd`` and require that it exists."""
    return require_existing(resolve_file_path(candidate, cwd))
