"""
Defines shared type aliases and value objects for the sprite builder.

Centralizes reusable type hints so layout, compositing, and export code
agree on the same small records.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

LayoutAxis = Literal["cols", "rows"]
OutputFormat = Literal["css", "json"]


@dataclass(frozen=True, slots=True)
class ImageEntry:
    """A directory entry and whether it is a supported image."""

    path: Path
    is_valid: bool


@dataclass(frozen=True, slots=True)
class GridCell:
    """Position of an image along the primary and secondary axes."""

    primary: int
    secondary: int


@dataclass(frozen=True, slots=True)
class PlacementCoordinate:
    """Canvas position where an image's visible top-left corner lands."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Bounds:
    """Pixel bounding box as (left, top, right, bottom)."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        """Return the horizontal extent."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Return the vertical extent."""
        return self.bottom - self.top

    def is_empty(self) -> bool:
        """Return True when the box covers no pixels."""
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True, slots=True)
class ExportRecord:
    """Name and trimmed top-left position of a placed layer."""

    name: str
    x: int
    y: int
