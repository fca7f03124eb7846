"""Shared helpers for promptcase (text coercion, YAML load, file read).

Used by casing, prompts, and cli.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

# --- Text ---


def coerce_text(value: Any) -> str:
    """Textual form of any value: None -> "", bytes decoded as UTF-8, else str(value)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


# --- File ---


def load_yaml_mapping(p: Path) -> dict[str, Any]:
    """Load a YAML file that must hold a mapping. Empty file -> {}. Raises ValueError otherwise."""
    with p.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Expected a YAML mapping in {p}, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def read_file_or_default(path: Path | None, default: str = "") -> str:
    """Return file text if path is a file, else default."""
    if path is not None and path.is_file():
        return path.read_text(encoding="utf-8")
    return default
