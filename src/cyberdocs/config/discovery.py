"""Locate and read the cyberdocs configuration file.

Discovery walks up from a start directory the way git looks for ``.git``.
In each directory a ``cyberdocs.toml`` is taken as-is; failing that, a
``pyproject.toml`` counts only if it carries a ``[tool.cyberdocs]`` table.
``CYBERDOCS_CONFIG`` short-circuits the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from cyberdocs.domain.errors import ConfigurationError

CONFIG_FILENAME = "cyberdocs.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "CYBERDOCS_CONFIG"


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; syntax errors become ConfigurationError."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc


def _tool_table(data: dict[str, Any]) -> dict[str, Any] | None:
    table = data.get("tool", {}).get("cyberdocs")
    return table if isinstance(table, dict) else None


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the cyberdocs settings held in *path*.

    For a ``pyproject.toml`` that is the ``[tool.cyberdocs]`` table (empty
    if absent); for any other file it is the whole document.
    """
    data = read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        return _tool_table(data) or {}
    return data


def _pyproject_with_table(directory: Path) -> Path | None:
    candidate = directory / PYPROJECT_FILENAME
    if not candidate.is_file():
        return None
    try:
        data = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        # Unparseable pyproject files are skipped.
        return None
    return candidate if _tool_table(data) is not None else None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``CYBERDOCS_CONFIG`` naming a missing file yields None rather than
    falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for current in (directory, *directory.parents):
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = _pyproject_with_table(current)
        if pyproject is not None:
            return pyproject
    return None
