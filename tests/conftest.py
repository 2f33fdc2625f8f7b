"""Root pytest fixtures for agents-toml tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

MINIMAL_MANIFEST = """
[package]
name = "test"
version = "1.0.0"

[agents]
claude-code = true
"""


@pytest.fixture
def minimal_manifest() -> str:
    """Smallest manifest with package metadata and one agent."""
    return MINIMAL_MANIFEST


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str | bytes], Path]:
    """Write manifest contents to an agents.toml file in a temp directory."""

    def _write(contents: str | bytes) -> Path:
        path = tmp_path / "agents.toml"
        if isinstance(contents, bytes):
            path.write_bytes(contents)
        else:
            path.write_text(contents, encoding="utf-8")
        return path

    return _write
