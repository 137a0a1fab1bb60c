"""Configuration: defaults, config file locations, and loading (global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from quietio.streams import DEFAULT_BUFFER_SIZE, DEFAULT_ENCODING, DEFAULT_ERRORS

# Directory holding a config.json, both under $HOME and inside a project
QUIETIO_DIR = ".quietio"
CONFIG_FILENAME = "config.json"


def global_config_path() -> Path:
    """Path to global config file (~/.quietio/config.json)."""
    return Path.home() / QUIETIO_DIR / CONFIG_FILENAME


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.quietio/config.json)."""
    return project_root / QUIETIO_DIR / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    return {
        "io": {
            "buffer_size": DEFAULT_BUFFER_SIZE,
            "encoding": DEFAULT_ENCODING,
            "errors": DEFAULT_ERRORS,
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON object from path; return None if file missing, invalid, or not an object."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def find_project_root(path: Path) -> Path | None:
    """Walk upward from path to the first directory containing .quietio/config.json."""
    resolved = path.resolve()
    if resolved.is_file():
        resolved = resolved.parent
    for candidate in (resolved, *resolved.parents):
        if project_config_path(candidate).is_file():
            return candidate
    return None


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.quietio/config.json) + project overrides.

    If project_root is None, only global config (and defaults) are used.
    """
    merged = default_config()
    global_data = _load_json(global_config_path())
    if global_data is not None:
        _deep_merge(merged, global_data)
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def io_options(config: dict[str, Any]) -> dict[str, Any]:
    """
    Keyword arguments (buffer_size, encoding, errors) for the stream helpers.
    Invalid values fall back to the defaults.
    """
    io_cfg = config.get("io") or {}
    buffer_size = io_cfg.get("buffer_size")
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int) or buffer_size <= 0:
        buffer_size = DEFAULT_BUFFER_SIZE
    encoding = io_cfg.get("encoding") or DEFAULT_ENCODING
    errors = io_cfg.get("errors") or DEFAULT_ERRORS
    return {"buffer_size": buffer_size, "encoding": encoding, "errors": errors}
