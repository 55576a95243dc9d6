"""Shared default values for user-facing configuration settings."""
from folder_sprite.type_defs import LayoutAxis, OutputFormat

# Layout
DEFAULT_LAYOUT: LayoutAxis = "cols"
DEFAULT_LIMIT = 1
DEFAULT_COL_SPACING = 100
DEFAULT_ROW_SPACING = 50

# Canvas
DEFAULT_CANVAS_WIDTH = 10000
DEFAULT_CANVAS_HEIGHT = 10000
DEFAULT_CANVAS_NAME = "sprite"

# Output
DEFAULT_OUTPUT_FORMAT: OutputFormat = "css"
DEFAULT_UNIT = "px"
DEFAULT_OUTPUT_DIR = "out"
DEFAULT_SPRITE_NAME = "sprite.png"
DEFAULT_SAVE_SPRITE = True

# Input
DEFAULT_SKIP_UNREADABLE = False
