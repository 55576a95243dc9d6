"""Helpers for managing output locations and persisted artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from folder_sprite.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from folder_sprite.canvas import PillowCanvas
    from folder_sprite.config import OutputConfig


def setup_output_directory(
    output_path: str,
    path_factory: Callable[[str], Path] = Path,
) -> Path:
    """
    Create the output directory if needed and return its path.

    Errors are not masked: an output location that cannot be created
    aborts the run before anything is written.
    """
    resolved_path = path_factory(output_path)
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create output directory: %s", exc)
        raise
    return resolved_path


def sprite_output_path(output_dir: Path, sprite_name: str) -> Path:
    """Return the sprite file path, forcing a ``.png`` suffix."""
    name = Path(sprite_name)
    if name.suffix.lower() != ".png":
        name = name.with_name(f"{name.name}.png")
    return output_dir / name


def write_coordinates(text: str, path: Path) -> Path:
    """Write coordinate text to ``path``, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Coordinates saved to: %s", path)
    return path


def save_outputs(
    canvas: PillowCanvas,
    coordinates: str,
    opts: OutputConfig,
) -> Path | None:
    """
    Persist the artifacts of a finished sprite run.

    Saves the flattened sprite as PNG unless disabled and writes the
    coordinate text to ``coords_file`` when one is configured. Returns
    the sprite path, or None if the sprite was not saved.
    """
    sprite_path: Path | None = None
    if opts.save_sprite:
        output_dir = setup_output_directory(opts.output)
        sprite_path = sprite_output_path(output_dir, opts.sprite_name)
        canvas.save(sprite_path)
        logger.info("Sprite saved to: %s (%dx%d)", sprite_path,
                    canvas.width, canvas.height)

    if opts.coords_file:
        write_coordinates(coordinates, Path(opts.coords_file))

    return sprite_path
