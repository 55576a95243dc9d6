"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

import folder_sprite.config as fs_config
import folder_sprite.main as fs_main
from folder_sprite.config_defaults import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_COL_SPACING,
    DEFAULT_LIMIT,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_ROW_SPACING,
    DEFAULT_SPRITE_NAME,
    DEFAULT_UNIT,
)
from folder_sprite.errors import (
    ConfigurationError,
    NoValidImagesFound,
    SpriteError,
)
from folder_sprite.logging_utils import logger, set_verbosity
from folder_sprite.runtime import resolve_project_version

FOLDER_PROMPT = "Select the folder to be imported: "
RETRY_PROMPT = "Select another folder? [y/N]: "

InputFn = Callable[[str], str]


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        description=(
            "Pack a folder of images into a grid sprite and print each "
            "image's position as CSS or JSON"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "folder-sprite icons/\n"
            "folder-sprite icons/ --layout rows --limit 4 --format json\n"
            "folder-sprite icons/ --col-spacing 32 --row-spacing 32 "
            "--limit 8 --output dist\n\n"
            "Note:\n"
            "  Coordinates are written to stdout; progress goes to stderr."
        ),
    )
    p.add_argument(
        "folder", nargs="?", default=None,
        help="Folder of images to pack (prompted for when omitted)")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--layout", choices=["cols", "rows"],
        help="Axis that fills first before wrapping (default: cols)")
    layout.add_argument(
        "--limit", type=int,
        help=("Cells along the primary axis before wrapping "
              f"(default: {DEFAULT_LIMIT})"))
    layout.add_argument(
        "--col-spacing", type=int,
        help=f"Pixels from column to column (default: {DEFAULT_COL_SPACING})")
    layout.add_argument(
        "--row-spacing", type=int,
        help=f"Pixels from row to row (default: {DEFAULT_ROW_SPACING})")

    output = p.add_argument_group("output")
    output.add_argument(
        "--format", choices=["css", "json"],
        help="Coordinate output format (default: css)")
    output.add_argument(
        "--unit", type=str,
        help=(f"Unit appended to offsets (default: '{DEFAULT_UNIT}'); "
              "pass an empty string for bare numbers"))
    output.add_argument(
        "--output", type=str,
        help=f"Output directory for the sprite (default: {DEFAULT_OUTPUT_DIR})")
    output.add_argument(
        "--sprite-name", type=str,
        help=f"Sprite filename (default: {DEFAULT_SPRITE_NAME})")
    output.add_argument(
        "--coords-file", type=str,
        help="Also write the coordinates to this file")
    output.add_argument(
        "--no-save", action="store_true",
        help="Print coordinates without saving the sprite image")

    canvas = p.add_argument_group("canvas")
    canvas.add_argument(
        "--canvas-width", type=int,
        help=f"Working canvas width (default: {DEFAULT_CANVAS_WIDTH})")
    canvas.add_argument(
        "--canvas-height", type=int,
        help=f"Working canvas height (default: {DEFAULT_CANVAS_HEIGHT})")

    inputs = p.add_argument_group("input")
    inputs.add_argument(
        "--skip-unreadable", action="store_true",
        help=("Warn about and skip images that fail to open instead of "
              "aborting the run"))
    inputs.add_argument(
        "--no-prompt", action="store_true",
        help="Never ask for a folder interactively")

    log = p.add_argument_group("logging")
    log.add_argument(
        "-v", "--verbose", action="store_true",
        help="Also log each placed image")
    log.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only log warnings and errors")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a sprite")

    return p


def log_parameters(
    folder: str,
    cfg: fs_config.SpriteConfig,
    args: argparse.Namespace,
) -> None:
    """Log all effective parameters."""
    logger.info("Source Folder: %s", folder)
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Layout: %s (limit %d)", cfg.layout.axis, cfg.layout.limit)
    logger.info("Column Spacing: %d", cfg.layout.col_spacing)
    logger.info("Row Spacing: %d", cfg.layout.row_spacing)
    logger.info("Canvas: %dx%d", cfg.canvas.width, cfg.canvas.height)
    logger.info("Output Format: %s", cfg.output.format)
    logger.info("Sprite Saving: %s",
                "Enabled" if cfg.output.save_sprite else "Disabled")
    logger.info("Unreadable Images: %s",
                "Skip" if cfg.input.skip_unreadable else "Abort")


def prompt_for_folder(input_fn: InputFn = input) -> str | None:
    """Ask for a folder path; return None if the user gives none."""
    try:
        answer = input_fn(FOLDER_PROMPT).strip()
    except EOFError:
        return None
    return answer or None


def confirm_retry(input_fn: InputFn = input) -> bool:
    """Ask whether to pick another folder after an empty one."""
    try:
        answer = input_fn(RETRY_PROMPT).strip().lower()
    except EOFError:
        return False
    return answer in ("y", "yes")


def run_from_args(
    args: argparse.Namespace,
    *,
    input_fn: InputFn = input,
    interactive: bool | None = None,
) -> fs_main.SpriteResult | None:
    """
    Build a sprite from command-line arguments.

    When interactive, a missing folder is prompted for and a folder with
    no supported images offers another attempt until the user declines.
    Returns None if the user ends the run without a sprite.
    """
    set_verbosity(verbose=args.verbose, quiet=args.quiet)

    base_cfg: fs_config.SpriteConfig | None = None
    if args.config:
        base_cfg = fs_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = fs_config.build_config_from_cli(vars(args), base_config=base_cfg)

    if interactive is None:
        interactive = not args.no_prompt and sys.stdin.isatty()

    folder: str | None = args.folder
    while True:
        if folder is None:
            folder = prompt_for_folder(input_fn) if interactive else None
            if folder is None:
                logger.info("No folder selected; nothing to do.")
                return None

        log_parameters(folder, cfg, args)
        try:
            return fs_main.create_sprite(Path(folder), cfg)
        except NoValidImagesFound as exc:
            if not interactive:
                raise
            logger.warning("%s", exc)
            if not confirm_retry(input_fn):
                logger.info("No sprite created.")
                return None
            folder = None


def main(argv: list[str] | None = None) -> None:
    """Run the command-line interface for sprite creation."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")

    try:
        result = run_from_args(args)
    except ConfigurationError as exc:
        arg_parser.error(str(exc))
    except (SpriteError, OSError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if result is None:
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
