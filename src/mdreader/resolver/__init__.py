"""Path resolution for md-reader."""

from .path_resolver import require_existing, resolve_existing_file, resolve_file_path

__all__ = ["require_existing", "resolve_existing_file", "resolve_file_path"]
