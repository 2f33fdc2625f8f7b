"""agents.toml 清单解析器：校验并规范化智能体技能包清单。

agents-toml: parser and validator for agents.toml skill-package manifests.

Turns manifest text into a strongly typed, normalized manifest, or into a
precise diagnostic describing why it was rejected.
"""
from __future__ import annotations

from agents_toml.errors import (
    AgentsTomlError,
    DependencyError,
    ManifestError,
    ParseErrorKind,
    StructuralError,
)
from agents_toml.parser import (
    ParseError,
    ParseResult,
    parse,
    parse_document,
    parse_file,
    parse_or_raise,
)
from agents_toml.schema import AgentId, Manifest
from agents_toml.types import (
    ClaudePluginDependency,
    Dependency,
    DependencyKind,
    GitDependency,
    GithubDependency,
    GitRef,
    LocalDependency,
    RefKind,
    RegistryDependency,
    ValidatedManifest,
)

__version__ = "0.1.0"

__all__ = [
    "AgentId",
    # Errors
    "AgentsTomlError",
    "ClaudePluginDependency",
    "Dependency",
    "DependencyError",
    "DependencyKind",
    "GitDependency",
    "GitRef",
    "GithubDependency",
    "LocalDependency",
    "Manifest",
    "ManifestError",
    # Parser
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "RefKind",
    "RegistryDependency",
    "StructuralError",
    # Types
    "ValidatedManifest",
    "__version__",
    "parse",
    "parse_document",
    "parse_file",
    "parse_or_raise",
]
