"""Runtime utilities for input validation, output, and version helpers."""

from .output import (
    save_outputs,
    setup_output_directory,
    sprite_output_path,
    write_coordinates,
)
from .validation import validate_source_folder
from .version import resolve_project_version

__all__ = [
    "resolve_project_version",
    "save_outputs",
    "setup_output_directory",
    "sprite_output_path",
    "validate_source_folder",
    "write_coordinates",
]
