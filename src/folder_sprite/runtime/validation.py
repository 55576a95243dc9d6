"""Input validation helpers for runtime configuration."""

from __future__ import annotations

import os
from pathlib import Path


def validate_source_folder(folder: str | Path) -> Path:
    """Ensure the source folder exists and is readable; return it as Path."""
    path = Path(folder).expanduser()
    if not path.exists():
        msg = f"Source folder not found: {folder}"
        raise FileNotFoundError(msg)
    if not path.is_dir():
        msg = f"Source path is not a folder: {folder}"
        raise NotADirectoryError(msg)
    if not os.access(path, os.R_OK | os.X_OK):
        msg = f"Source folder is not readable: {folder}"
        raise PermissionError(msg)
    return path
