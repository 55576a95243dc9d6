"""
Configuration schema and loader for the folder sprite builder.

Defines Pydantic models representing structured configuration sections,
a TOML-based config loader, and the merge of CLI overrides on top of a
base configuration. Validation failures surface as ConfigurationError
before any image is processed.
"""

from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from folder_sprite.config_defaults import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_NAME,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_COL_SPACING,
    DEFAULT_LAYOUT,
    DEFAULT_LIMIT,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_ROW_SPACING,
    DEFAULT_SAVE_SPRITE,
    DEFAULT_SKIP_UNREADABLE,
    DEFAULT_SPRITE_NAME,
    DEFAULT_UNIT,
)
from folder_sprite.errors import ConfigurationError
from folder_sprite.type_defs import LayoutAxis, OutputFormat


class LayoutConfig(BaseModel):
    """Grid direction, wrap limit, and cell spacing."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    axis: LayoutAxis = Field(DEFAULT_LAYOUT)
    limit: int = Field(DEFAULT_LIMIT, ge=1)
    col_spacing: int = Field(DEFAULT_COL_SPACING, ge=0)
    row_spacing: int = Field(DEFAULT_ROW_SPACING, ge=0)


class CanvasConfig(BaseModel):
    """Size of the oversized working canvas."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(DEFAULT_CANVAS_WIDTH, ge=1)
    height: int = Field(DEFAULT_CANVAS_HEIGHT, ge=1)
    name: str = Field(DEFAULT_CANVAS_NAME, min_length=1)


class OutputConfig(BaseModel):
    """Coordinate format and sprite destination."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: OutputFormat = Field(DEFAULT_OUTPUT_FORMAT)
    unit: str = Field(DEFAULT_UNIT)
    output: str = Field(DEFAULT_OUTPUT_DIR)
    sprite_name: str = Field(DEFAULT_SPRITE_NAME, min_length=1)
    save_sprite: bool = DEFAULT_SAVE_SPRITE
    coords_file: str | None = None


class InputConfig(BaseModel):
    """Handling of source images."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    skip_unreadable: bool = DEFAULT_SKIP_UNREADABLE


class SpriteConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories. Built once per run and read-only
    afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    canvas: CanvasConfig = Field(
        default_factory=lambda: CanvasConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )
    input: InputConfig = Field(
        default_factory=lambda: InputConfig.model_validate({}),
    )


def validate_config(data: dict[str, Any]) -> SpriteConfig:
    """Validate raw config data, wrapping schema errors."""
    try:
        return SpriteConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise ConfigurationError(msg) from exc


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> SpriteConfig:
        """
        Load a sprite configuration from a TOML file.

        Returns a validated SpriteConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigurationError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            try:
                doc = tomlkit.load(f)
            except TOMLKitError as exc:
                msg = f"Could not parse config file {path}: {exc}"
                raise ConfigurationError(msg) from exc

        return validate_config(doc.unwrap())


# CLI argument name -> (section, field)
_CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "layout": ("layout", "axis"),
    "limit": ("layout", "limit"),
    "col_spacing": ("layout", "col_spacing"),
    "row_spacing": ("layout", "row_spacing"),
    "canvas_width": ("canvas", "width"),
    "canvas_height": ("canvas", "height"),
    "format": ("output", "format"),
    "unit": ("output", "unit"),
    "output": ("output", "output"),
    "sprite_name": ("output", "sprite_name"),
    "coords_file": ("output", "coords_file"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: SpriteConfig | None = None,
) -> SpriteConfig:
    """
    Merge parsed CLI arguments on top of a base configuration.

    Only arguments that were actually supplied override the base; flags
    like ``--no-save`` and ``--skip-unreadable`` only ever switch their
    option on.
    """
    base = base_config or SpriteConfig.model_validate({})
    data = base.model_dump()

    for arg_name, (section, field) in _CLI_FIELD_MAP.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][field] = value

    if args.get("no_save"):
        data["output"]["save_sprite"] = False
    if args.get("skip_unreadable"):
        data["input"]["skip_unreadable"] = True

    return validate_config(data)
