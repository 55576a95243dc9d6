"""
Logging setup for the folder sprite builder.

Progress and diagnostics always go to stderr through one shared logger.
Stdout is reserved for the coordinate text, so a run can be piped
straight into a stylesheet or JSON file.
"""

import logging
import sys

LOGGER_NAME = "folder_sprite"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
) -> logging.Logger:
    """
    Return the named logger, attaching a stderr handler on first use.

    Repeated calls only adjust the level, so modules importing the
    shared logger never stack duplicate handlers.
    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if not logger_instance.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger_instance.addHandler(handler)
        logger_instance.propagate = False
    return logger_instance


def set_verbosity(*, verbose: bool = False, quiet: bool = False) -> int:
    """
    Pick the shared logger level from the CLI flags and return it.

    ``quiet`` wins over ``verbose``: only warnings and errors remain,
    which keeps skipped-image warnings visible.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logger.setLevel(level)
    return level


# Shared logger used across modules
logger = setup_logger()
