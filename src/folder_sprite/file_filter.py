"""Screening of folder entries for supported raster images."""

from __future__ import annotations

from pathlib import Path

from folder_sprite.constants import SUPPORTED_EXTENSIONS
from folder_sprite.type_defs import ImageEntry


def is_valid_image(filename: str) -> bool:
    """
    Return True if the filename mentions a supported image extension.

    The check is a case-insensitive substring match rather than a suffix
    match, so ``notes.jpgx`` is accepted while ``readme.txt`` is not.
    """
    lowered = filename.lower()
    return any(ext in lowered for ext in SUPPORTED_EXTENSIONS)


def classify_entry(path: Path) -> ImageEntry:
    """Build an ImageEntry for a single directory entry."""
    return ImageEntry(
        path=path,
        is_valid=path.is_file() and is_valid_image(path.name),
    )


def scan_folder(folder: Path) -> list[ImageEntry]:
    """
    Classify every direct child of ``folder`` in filename order.

    Subfolders are listed but never valid; nested content is not visited.

    Raises:
        NotADirectoryError: If ``folder`` is not a directory.
        OSError: If the folder cannot be read.

    """
    if not folder.is_dir():
        msg = f"Source folder not found: {folder}"
        raise NotADirectoryError(msg)
    return [classify_entry(p) for p in sorted(folder.iterdir())]


def accepted_images(folder: Path) -> list[Path]:
    """Return the paths of supported images in ``folder``, in scan order."""
    return [entry.path for entry in scan_folder(folder) if entry.is_valid]
