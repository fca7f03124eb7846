"""Pytest fixtures for promptcase tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_prompt_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write YAML text to tmp_path/<name> and return the path."""

    def _write(text: str, name: str = "prompt.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
