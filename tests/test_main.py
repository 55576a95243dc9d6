"""
Tests for the top-level sprite orchestration.

Runs the full pipeline on real image folders written with Pillow.
"""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

import folder_sprite.main as fs_main
from folder_sprite.config import SpriteConfig
from folder_sprite.errors import ImageOpenError, NoValidImagesFound


class TestBuildSprite:
    """Compositing and finalizing without saving."""

    def test_icon_folder_default_layout(
        self,
        icon_folder: Path,
        sprite_config: SpriteConfig,
    ) -> None:
        result = fs_main.build_sprite(icon_folder, sprite_config)

        layers = result.canvas.layers
        assert [layer.name for layer in layers] == ["icon1", "icon2"]
        bounds = [result.canvas.layer_bounds(layer) for layer in layers]
        assert [(b.left, b.top) for b in bounds] == [(0, 0), (0, 50)]
        assert result.canvas.size == (32, 82)
        assert [p.name for p in result.placed] == ["icon1.png", "icon2.png"]
        assert result.skipped == []

    def test_grid_wraps(
        self,
        make_image_folder: Callable[..., Path],
        make_sprite_config: Callable[..., SpriteConfig],
    ) -> None:
        folder = make_image_folder(
            [(f"i{n}.png", (10, 10)) for n in range(5)],
        )
        cfg = make_sprite_config(
            layout={"axis": "cols", "limit": 2, "col_spacing": 20,
                    "row_spacing": 15},
        )
        result = fs_main.build_sprite(folder, cfg)
        positions = {
            layer.name: (layer.x, layer.y) for layer in result.canvas.layers
        }
        assert positions == {
            "i0": (0, 0), "i1": (20, 0),
            "i2": (0, 15), "i3": (20, 15),
            "i4": (0, 30),
        }
        assert result.canvas.size == (30, 40)

    def test_empty_folder(
        self,
        make_image_folder: Callable[..., Path],
        sprite_config: SpriteConfig,
    ) -> None:
        folder = make_image_folder([], extra_files=("readme.txt",),
                                   subdirs=("pics.png",))
        with pytest.raises(NoValidImagesFound) as exc_info:
            fs_main.build_sprite(folder, sprite_config)
        assert exc_info.value.folder == folder

    def test_missing_folder(
        self,
        tmp_path: Path,
        sprite_config: SpriteConfig,
    ) -> None:
        with pytest.raises(FileNotFoundError):
            fs_main.build_sprite(tmp_path / "nope", sprite_config)

    def test_unreadable_image_aborts_by_default(
        self,
        make_image_folder: Callable[..., Path],
        sprite_config: SpriteConfig,
    ) -> None:
        folder = make_image_folder([("a.png", (4, 4))],
                                   extra_files=("b.png",))
        with pytest.raises(ImageOpenError):
            fs_main.build_sprite(folder, sprite_config)

    def test_unreadable_image_skipped_when_enabled(
        self,
        make_image_folder: Callable[..., Path],
        make_sprite_config: Callable[..., SpriteConfig],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        folder = make_image_folder([("a.png", (4, 4)), ("c.png", (4, 4))],
                                   extra_files=("b.png",))
        cfg = make_sprite_config(input_={"skip_unreadable": True})
        with caplog.at_level("WARNING"):
            result = fs_main.build_sprite(folder, cfg)

        assert [p.name for p in result.skipped] == ["b.png"]
        # the skipped file does not consume a grid cell
        assert [(layer.name, layer.y) for layer in result.canvas.layers] == \
            [("a", 0), ("c", 50)]
        assert any("Skipping unreadable" in r.message for r in caplog.records)

    def test_only_unreadable_images_is_empty(
        self,
        make_image_folder: Callable[..., Path],
        make_sprite_config: Callable[..., SpriteConfig],
    ) -> None:
        folder = make_image_folder([], extra_files=("x.png",))
        cfg = make_sprite_config(input_={"skip_unreadable": True})
        with pytest.raises(NoValidImagesFound):
            fs_main.build_sprite(folder, cfg)

    def test_warns_when_grid_exceeds_canvas(
        self,
        make_image_folder: Callable[..., Path],
        make_sprite_config: Callable[..., SpriteConfig],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        folder = make_image_folder([("a.png", (4, 4)), ("b.png", (4, 4))])
        cfg = make_sprite_config(canvas={"width": 40, "height": 40})
        with caplog.at_level("WARNING"):
            result = fs_main.build_sprite(folder, cfg)
        assert any("beyond" in r.message for r in caplog.records)
        assert result.canvas.size == (4, 54)


class TestCreateSprite:
    """Full runs including saving and printing."""

    def test_end_to_end_css(
        self,
        icon_folder: Path,
        sprite_config: SpriteConfig,
    ) -> None:
        stream = io.StringIO()
        result = fs_main.create_sprite(icon_folder, sprite_config, stream)

        lines = stream.getvalue().splitlines()
        assert lines == [
            ".icon2 { background-position: -0px -50px; }",
            ".icon1 { background-position: -0px -0px; }",
        ]
        assert result.coordinates == stream.getvalue()
        assert result.sprite_path is not None
        assert result.sprite_path.name == "sprite.png"
        with Image.open(result.sprite_path) as sprite:
            assert sprite.size == (32, 82)
            assert sprite.mode == "RGBA"
            assert sprite.getpixel((0, 40))[3] == 0

    def test_end_to_end_json_with_coords_file(
        self,
        icon_folder: Path,
        make_sprite_config: Callable[..., SpriteConfig],
        tmp_path: Path,
    ) -> None:
        coords = tmp_path / "coords" / "sprite.json"
        cfg = make_sprite_config(
            output={"format": "json", "unit": "",
                    "coords_file": str(coords), "save_sprite": False},
        )
        stream = io.StringIO()
        result = fs_main.create_sprite(icon_folder, cfg, stream)

        assert result.sprite_path is None
        assert coords.read_text(encoding="utf-8") == stream.getvalue()
        assert json.loads(stream.getvalue()) == [
            {"layer": "icon2", "x": "0", "y": "-50"},
            {"layer": "icon1", "x": "0", "y": "-0"},
        ]

    def test_nothing_written_on_failure(
        self,
        make_image_folder: Callable[..., Path],
        sprite_config: SpriteConfig,
    ) -> None:
        folder = make_image_folder([("a.png", (4, 4))],
                                   extra_files=("b.png",))
        stream = io.StringIO()
        with pytest.raises(ImageOpenError):
            fs_main.create_sprite(folder, sprite_config, stream)
        assert stream.getvalue() == ""
        assert not Path(sprite_config.output.output).exists()


def test_transparent_only_folder_saves_tiny_sprite(
    make_image_folder: Callable[..., Path],
    make_sprite_config: Callable[..., SpriteConfig],
) -> None:
    folder = make_image_folder([])
    Image.new("RGBA", (4, 4), (0, 0, 0, 0)).save(folder / "ghost.png")
    cfg = make_sprite_config(canvas={"width": 3000, "height": 3000})

    stream = io.StringIO()
    result = fs_main.create_sprite(folder, cfg, stream)

    assert result.build.canvas.size == (1, 1)
    assert result.sprite_path is not None
    with Image.open(result.sprite_path) as sprite:
        assert sprite.size == (1, 1)
    assert stream.getvalue() == ".ghost { background-position: -0px -0px; }\n"
