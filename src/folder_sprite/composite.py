"""Placement of source images onto the sprite canvas and final cleanup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import folder_sprite.image_io as fs_image_io
from folder_sprite.canvas import Canvas, Layer, PillowCanvas
from folder_sprite.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

    from PIL import Image

    from folder_sprite.config import CanvasConfig
    from folder_sprite.type_defs import PlacementCoordinate


def create_canvas(config: CanvasConfig) -> PillowCanvas:
    """Create the oversized, transparent working canvas for a run."""
    logger.info("Creating %dx%d working canvas", config.width, config.height)
    return PillowCanvas.create(config.width, config.height, config.name)


class CompositeBuilder:
    """Adds source images to a canvas as named, positioned layers."""

    def place(
        self,
        image_path: Path,
        canvas: Canvas,
        coordinate: PlacementCoordinate,
    ) -> Layer:
        """
        Open ``image_path`` and place its content at ``coordinate``.

        Raises:
            ImageOpenError: If the file cannot be decoded.

        """
        image = fs_image_io.load_image(image_path)
        return self.place_image(
            image,
            fs_image_io.layer_name_for(image_path),
            canvas,
            coordinate,
        )

    def place_image(
        self,
        image: Image.Image,
        name: str,
        canvas: Canvas,
        coordinate: PlacementCoordinate,
    ) -> Layer:
        """
        Add an already loaded image as the topmost layer.

        The layer is first moved so its visible content starts at the
        origin, then moved to ``coordinate``; transparent margins in the
        source therefore do not shift the placement.
        """
        layer = canvas.add_layer(image, name)
        bounds = canvas.layer_bounds(layer)
        canvas.translate(layer, -bounds.left, -bounds.top)
        canvas.translate(layer, coordinate.x, coordinate.y)
        logger.debug("Placed '%s' at (%d, %d)", name, coordinate.x,
                     coordinate.y)
        return layer


class CanvasFinalizer:
    """Turns the oversized working canvas into a tight sprite sheet."""

    def finalize(self, canvas: Canvas) -> None:
        """Drop the placeholder layer, reveal clipped content, and trim."""
        layers = canvas.layers
        if not layers:
            msg = "Cannot finalize a canvas without layers"
            raise ValueError(msg)
        canvas.remove_layer(layers[0])
        canvas.reveal_all()
        canvas.trim_to_content()
        logger.info("Trimmed sprite to %dx%d", canvas.width, canvas.height)
