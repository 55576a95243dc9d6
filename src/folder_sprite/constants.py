"""
Constants used internally by the folder sprite builder.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Extensions are matched as substrings of the lowercased filename, so
# "icon.jpgx" is accepted as well.
SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".gif", ".png", ".tif")

# Color modes
COLOR_MODE_RGBA = "RGBA"
COLOR_TRANSPARENT = (0, 0, 0, 0)

# Name given to the layer created together with the canvas
PLACEHOLDER_LAYER_NAME = "Layer 1"

# Sprite output
SPRITE_FORMAT = "PNG"
