"""Public package exports for the folder sprite builder."""

from __future__ import annotations

from .config import LayoutConfig, SpriteConfig
from .errors import (
    ConfigurationError,
    ImageOpenError,
    NoValidImagesFound,
    SpriteError,
)
from .file_filter import is_valid_image
from .layout import GridLayoutPlanner
from .main import build_sprite, create_sprite

__all__ = [
    "ConfigurationError",
    "GridLayoutPlanner",
    "ImageOpenError",
    "LayoutConfig",
    "NoValidImagesFound",
    "SpriteConfig",
    "SpriteError",
    "build_sprite",
    "create_sprite",
    "is_valid_image",
]
