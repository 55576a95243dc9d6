"""
Layered drawing surface built on Pillow.

``PillowCanvas`` provides the small document/layer model the sprite
builder needs: layers carry their own bitmap and offset, bounds are
measured on non-transparent pixels, and the canvas can be revealed,
trimmed, and flattened into a single RGBA image.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from PIL import Image

from folder_sprite.constants import (
    COLOR_MODE_RGBA,
    COLOR_TRANSPARENT,
    PLACEHOLDER_LAYER_NAME,
    SPRITE_FORMAT,
)
from folder_sprite.logging_utils import logger
from folder_sprite.type_defs import Bounds

_EMPTY_BOUNDS = Bounds(0, 0, 0, 0)


@dataclass(eq=False)
class Layer:
    """Named bitmap positioned on a canvas by its top-left offset."""

    name: str
    image: Image.Image
    x: int = 0
    y: int = 0

    def content_bounds(self) -> Bounds:
        """Return the box of non-transparent pixels in canvas space."""
        bbox = self.image.getchannel("A").getbbox()
        if bbox is None:
            return _EMPTY_BOUNDS
        left, top, right, bottom = bbox
        return Bounds(
            self.x + left, self.y + top, self.x + right, self.y + bottom,
        )

    def extent(self) -> Bounds:
        """Return the full bitmap box in canvas space."""
        return Bounds(
            self.x, self.y, self.x + self.image.width,
            self.y + self.image.height,
        )


class Canvas(Protocol):
    """Capabilities the compositing steps rely on."""

    width: int
    height: int

    @property
    def layers(self) -> list[Layer]: ...

    def add_layer(self, image: Image.Image, name: str) -> Layer: ...

    def layer_bounds(self, layer: Layer) -> Bounds: ...

    def translate(self, layer: Layer, dx: int, dy: int) -> None: ...

    def remove_layer(self, layer: Layer) -> None: ...

    def reveal_all(self) -> None: ...

    def trim_to_content(self) -> None: ...

    def flatten(self) -> Image.Image: ...


class PillowCanvas:
    """
    Canvas with layers stacked bottom to top in insertion order.

    The nominal size is bookkeeping only; no full-size bitmap exists
    until ``flatten`` is called, so an oversized working canvas costs
    nothing up front.
    """

    def __init__(self, width: int, height: int, name: str = "sprite") -> None:
        if width <= 0 or height <= 0:
            msg = "canvas size must be positive"
            raise ValueError(msg)
        self.width = width
        self.height = height
        self.name = name
        self._layers: list[Layer] = []

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        name: str = "sprite",
    ) -> PillowCanvas:
        """Create a transparent canvas holding one empty placeholder layer."""
        canvas = cls(width, height, name)
        placeholder = Image.new(COLOR_MODE_RGBA, (1, 1), COLOR_TRANSPARENT)
        canvas.add_layer(placeholder, PLACEHOLDER_LAYER_NAME)
        logger.debug("Created %dx%d canvas '%s'", width, height, name)
        return canvas

    @property
    def layers(self) -> list[Layer]:
        """Layers from bottommost to topmost."""
        return list(self._layers)

    @property
    def size(self) -> tuple[int, int]:
        """Return the current canvas (width, height)."""
        return self.width, self.height

    def add_layer(self, image: Image.Image, name: str) -> Layer:
        """Insert ``image`` as the new topmost layer at the origin."""
        if image.mode != COLOR_MODE_RGBA:
            image = image.convert(COLOR_MODE_RGBA)
        layer = Layer(name=name, image=image)
        self._layers.append(layer)
        return layer

    def layer_bounds(self, layer: Layer) -> Bounds:
        """Return the content bounds of ``layer``."""
        self._require(layer)
        return layer.content_bounds()

    def translate(self, layer: Layer, dx: int, dy: int) -> None:
        """Move ``layer`` by the given offset."""
        self._require(layer)
        layer.x += dx
        layer.y += dy

    def remove_layer(self, layer: Layer) -> None:
        """Delete ``layer`` from the stack."""
        self._require(layer)
        self._layers.remove(layer)

    def content_bounds(self) -> Bounds:
        """Return the union of every layer's non-transparent pixels."""
        boxes = [
            b for b in (layer.content_bounds() for layer in self._layers)
            if not b.is_empty()
        ]
        if not boxes:
            return _EMPTY_BOUNDS
        return Bounds(
            min(b.left for b in boxes),
            min(b.top for b in boxes),
            max(b.right for b in boxes),
            max(b.bottom for b in boxes),
        )

    def reveal_all(self) -> None:
        """Grow the canvas so every layer's bitmap lies inside it."""
        if not self._layers:
            return
        extents = [layer.extent() for layer in self._layers]
        left = min(0, *(e.left for e in extents))
        top = min(0, *(e.top for e in extents))
        right = max(self.width, *(e.right for e in extents))
        bottom = max(self.height, *(e.bottom for e in extents))
        self._shift_layers(-left, -top)
        self.width = right - left
        self.height = bottom - top

    def trim_to_content(self) -> None:
        """
        Crop the canvas to the tight box around all visible content.

        A canvas with nothing visible collapses to a single transparent
        pixel rather than keeping its oversized working size.
        """
        bounds = self.content_bounds()
        if bounds.is_empty():
            logger.warning("Canvas '%s' has no visible content; trimming "
                           "to 1x1", self.name)
            for layer in self._layers:
                layer.x = 0
                layer.y = 0
            self.width = 1
            self.height = 1
            return
        self._shift_layers(-bounds.left, -bounds.top)
        self.width = bounds.width
        self.height = bounds.height

    def flatten(self) -> Image.Image:
        """Composite all layers, bottom first, into one RGBA image."""
        result = Image.new(COLOR_MODE_RGBA, self.size, COLOR_TRANSPARENT)
        for layer in self._layers:
            result.alpha_composite(
                layer.image,
                dest=(max(layer.x, 0), max(layer.y, 0)),
                source=(max(-layer.x, 0), max(-layer.y, 0)),
            )
        return result

    def save(self, path: Path) -> Path:
        """Flatten the canvas and write it to ``path`` as PNG."""
        self.flatten().save(path, format=SPRITE_FORMAT)
        return path

    def _shift_layers(self, dx: int, dy: int) -> None:
        for layer in self._layers:
            layer.x += dx
            layer.y += dy

    def _require(self, layer: Layer) -> None:
        if not any(layer is existing for existing in self._layers):
            msg = f"Layer '{layer.name}' does not belong to this canvas"
            raise ValueError(msg)
