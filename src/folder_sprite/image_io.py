"""Image loading for sprite sources."""
from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from folder_sprite.constants import COLOR_MODE_RGBA
from folder_sprite.errors import ImageOpenError


def load_image(path: Path) -> Image.Image:
    """
    Open an image file and return an RGBA copy detached from the file.

    The source file is closed before returning and is never written to.
    Palette, grayscale, and CMYK sources are normalized to RGBA so that
    every layer shares one pixel format and keeps its transparency.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGBA mode

    Raises:
        ImageOpenError: If the image cannot be opened or decoded

    """
    try:
        with Image.open(path) as src:
            return src.convert(COLOR_MODE_RGBA)
    except FileNotFoundError as e:
        raise ImageOpenError(path, "file not found") from e
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as e:
        raise ImageOpenError(path, str(e)) from e


def layer_name_for(path: Path) -> str:
    """
    Return the filename with the text after its last dot removed.

    Only the final extension segment is stripped, so ``a.b.jpeg`` becomes
    ``a.b``. A name without any dot yields an empty string.
    """
    return path.name.rpartition(".")[0]
