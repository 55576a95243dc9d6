"""Exception types raised while building a sprite."""

from __future__ import annotations

from pathlib import Path


class SpriteError(Exception):
    """Base class for sprite building failures."""


class ConfigurationError(SpriteError, ValueError):
    """Raised when the static configuration is invalid."""


class NoValidImagesFound(SpriteError):
    """Raised when a folder holds no supported image files."""

    def __init__(self, folder: Path) -> None:
        self.folder = folder
        super().__init__(
            f"The folder '{folder}' does not contain any recognized "
            "image formats",
        )


class ImageOpenError(SpriteError, OSError):
    """Raised when a file with a supported extension cannot be decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Error loading image '{path}': {reason}")
