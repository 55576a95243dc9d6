"""
Test configuration and shared fixtures for folder_sprite.

This module defines reusable pytest fixtures for building image folders,
configs, and canvases. These fixtures support all test modules in the
test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from folder_sprite.config import SpriteConfig
from folder_sprite.constants import COLOR_MODE_RGBA
from folder_sprite.logging_utils import logger

ImageSpec = tuple[str, tuple[int, int]]


def save_image(path: Path, size: tuple[int, int], color: str = "red") -> Path:
    """Write a solid image to ``path``, picking the mode from its suffix."""
    mode = COLOR_MODE_RGBA if path.suffix.lower() == ".png" else "RGB"
    Image.new(mode, size, color=color).save(path)
    return path


@pytest.fixture
def make_image_folder(tmp_path: Path) -> Callable[..., Path]:
    """
    Create a folder filled with the given files.

    Image files are written with real pixel data; any other name is
    written as plain text.
    """
    counter = {"n": 0}

    def _make(
        images: list[ImageSpec],
        *,
        extra_files: tuple[str, ...] = (),
        subdirs: tuple[str, ...] = (),
    ) -> Path:
        counter["n"] += 1
        folder = tmp_path / f"images_{counter['n']}"
        folder.mkdir()
        for name, size in images:
            save_image(folder / name, size)
        for name in extra_files:
            (folder / name).write_text("not an image", encoding="utf-8")
        for name in subdirs:
            (folder / name).mkdir()
        return folder

    return _make


@pytest.fixture
def icon_folder(make_image_folder: Callable[..., Path]) -> Path:
    """Two 32x32 PNG icons and a text file."""
    return make_image_folder(
        [("icon1.png", (32, 32)), ("icon2.png", (32, 32))],
        extra_files=("readme.txt",),
    )


@pytest.fixture
def make_sprite_config(tmp_path: Path) -> Callable[..., SpriteConfig]:
    """
    Build SpriteConfig instances with optional section overrides.

    Ensures each config writes its sprite under tmp_path and uses a
    small working canvas so tests stay fast.
    """
    default_output = tmp_path / "sprite_out"

    def _build(
        *,
        layout: dict[str, Any] | None = None,
        canvas: dict[str, Any] | None = None,
        output: dict[str, Any] | None = None,
        input_: dict[str, Any] | None = None,
    ) -> SpriteConfig:
        data: dict[str, Any] = {
            "layout": dict(layout or {}),
            "canvas": {"width": 2000, "height": 2000, **(canvas or {})},
            "output": {"output": str(default_output), **(output or {})},
            "input": dict(input_ or {}),
        }
        return SpriteConfig.model_validate(data)

    return _build


@pytest.fixture
def sprite_config(make_sprite_config: Callable[..., SpriteConfig]) -> SpriteConfig:
    """Default configuration writing into a temporary directory."""
    return make_sprite_config()


@pytest.fixture
def padded_image() -> Image.Image:
    """A 20x10 transparent image with a 4x3 opaque block at (5, 2)."""
    img = Image.new(COLOR_MODE_RGBA, (20, 10), (0, 0, 0, 0))
    img.paste((0, 0, 255, 255), (5, 2, 9, 5))
    return img


@pytest.fixture(autouse=True)
def enable_logger_propagation(
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[None]:
    """Let caplog see the sprite logger and undo CLI level changes."""
    monkeypatch.setattr(logger, "propagate", True)
    level = logger.level
    yield
    logger.setLevel(level)
