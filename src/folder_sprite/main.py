"""Top-level orchestration for building a sprite from a folder."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import folder_sprite.file_filter as fs_file_filter
import folder_sprite.image_io as fs_image_io
import folder_sprite.runtime as fs_runtime
from folder_sprite.composite import (
    CanvasFinalizer,
    CompositeBuilder,
    create_canvas,
)
from folder_sprite.errors import ImageOpenError, NoValidImagesFound
from folder_sprite.export import CoordinateExporter
from folder_sprite.layout import GridLayoutPlanner
from folder_sprite.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from folder_sprite.canvas import PillowCanvas
    from folder_sprite.config import SpriteConfig


@dataclass
class BuildResult:
    """Finalized canvas plus bookkeeping about processed files."""

    canvas: PillowCanvas
    placed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


@dataclass
class SpriteResult:
    """Everything a finished run produced."""

    build: BuildResult
    coordinates: str
    sprite_path: Path | None = None


def build_sprite(folder: str | Path, config: SpriteConfig) -> BuildResult:
    """
    Composite every supported image in ``folder`` into a trimmed canvas.

    Images are placed in filename order. The working canvas is only
    created once the first image has been loaded.

    Raises:
        NoValidImagesFound: If nothing in the folder could be placed.
        ImageOpenError: If an image fails to load and skipping is off.
        OSError: If the folder cannot be read.

    """
    source = fs_runtime.validate_source_folder(folder)
    candidates = fs_file_filter.accepted_images(source)
    logger.info("Found %d supported image(s) in %s", len(candidates), source)

    planner = GridLayoutPlanner(config.layout)
    builder = CompositeBuilder()
    canvas: PillowCanvas | None = None
    placed: list[Path] = []
    skipped: list[Path] = []

    for path in candidates:
        try:
            image = fs_image_io.load_image(path)
        except ImageOpenError as exc:
            if not config.input.skip_unreadable:
                raise
            logger.warning("Skipping unreadable image: %s", exc)
            skipped.append(path)
            continue

        if canvas is None:
            canvas = create_canvas(config.canvas)

        coordinate = planner.next_coordinate()
        builder.place_image(
            image,
            fs_image_io.layer_name_for(path),
            canvas,
            coordinate,
        )
        placed.append(path)

    if canvas is None:
        raise NoValidImagesFound(source)

    max_x, max_y = planner.extent
    if max_x >= config.canvas.width or max_y >= config.canvas.height:
        logger.warning(
            "Grid extends to (%d, %d), beyond the %dx%d working canvas",
            max_x, max_y, config.canvas.width, config.canvas.height,
        )

    CanvasFinalizer().finalize(canvas)
    logger.info("Placed %d image(s), skipped %d", len(placed), len(skipped))
    return BuildResult(canvas=canvas, placed=placed, skipped=skipped)


def create_sprite(
    folder: str | Path,
    config: SpriteConfig,
    stream: TextIO | None = None,
) -> SpriteResult:
    """
    Build the sprite, save it, and write the coordinates to ``stream``.

    Nothing is saved or printed unless the whole folder was processed.
    """
    build = build_sprite(folder, config)

    exporter = CoordinateExporter(config.output.format, config.output.unit)
    coordinates = exporter.render(build.canvas)

    sprite_path = fs_runtime.save_outputs(
        build.canvas,
        coordinates,
        config.output,
    )

    out = stream if stream is not None else sys.stdout
    out.write(coordinates)
    out.flush()

    return SpriteResult(
        build=build,
        coordinates=coordinates,
        sprite_path=sprite_path,
    )
