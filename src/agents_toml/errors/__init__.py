"""错误体系：提供与清单解析阶段对齐的结构化错误类型。

Error hierarchy for agents-toml.

Provides structured error types aligned with the parse pipeline stages.
"""

from agents_toml.errors.base import (
    AgentsTomlError,
    DependencyError,
    ErrorContext,
    Issue,
    ManifestError,
    StructuralError,
)
from agents_toml.errors.kinds import ParseErrorKind

__all__ = [
    # Base errors
    "AgentsTomlError",
    "DependencyError",
    "ErrorContext",
    "Issue",
    "ManifestError",
    # Classification
    "ParseErrorKind",
    "StructuralError",
]
