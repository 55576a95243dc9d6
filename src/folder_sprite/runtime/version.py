"""Version lookup for ``folder-sprite --version``."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from folder_sprite.logging_utils import logger

DISTRIBUTION_NAME = "folder-sprite"
UNKNOWN_VERSION = "0.0.0"


def _pyproject_version(start: Path) -> str | None:
    """Return project.version from the nearest pyproject.toml above start."""
    for parent in start.parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None
    return None


def resolve_project_version() -> str:
    """
    Return the installed version of folder-sprite.

    Source checkouts that were never installed fall back to the version
    in the repository's pyproject.toml, then to "0.0.0".
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass
    return _pyproject_version(Path(__file__).resolve()) or UNKNOWN_VERSION
