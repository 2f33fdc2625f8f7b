"""
Parse failure classification.

Each failure belongs to exactly one pipeline stage.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Kind of parse failure, ordered by pipeline stage."""

    INVALID_TOML = "invalid_toml"
    INVALID_MANIFEST = "invalid_manifest"
    INVALID_DEPENDENCY = "invalid_dependency"

    @property
    def stage(self) -> int:
        """1-based pipeline stage that produces this kind."""
        return _STAGES[self]


_STAGES: dict[ParseErrorKind, int] = {
    ParseErrorKind.INVALID_TOML: 1,
    ParseErrorKind.INVALID_MANIFEST: 2,
    ParseErrorKind.INVALID_DEPENDENCY: 3,
}
