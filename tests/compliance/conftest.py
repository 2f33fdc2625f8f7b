"""
Pytest fixtures for agents.toml compliance tests.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

# Default compliance directory: the cases bundled next to this file
COMPLIANCE_DIR = Path(
    os.environ.get(
        "AGENTS_TOML_COMPLIANCE_DIR",
        str(Path(__file__).resolve().parent),
    )
)


@pytest.fixture(scope="session")
def compliance_dir() -> Path:
    """Session fixture for the compliance test cases directory."""
    return COMPLIANCE_DIR
