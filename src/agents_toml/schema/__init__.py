"""
Schema layer - structural models for agents.toml.

This module handles:
- Closed table models for every manifest section
- Dependency declaration shapes and their discrimination
- Primitive string constraints and known agent identifiers
- Conversion of schema violations into path-qualified issues
"""

from agents_toml.schema.dependencies import (
    GIT_REF_FIELDS,
    ClaudePluginDeclaration,
    DependencyDeclaration,
    GitDeclaration,
    GithubDeclaration,
    LocalDeclaration,
    RegistryDeclaration,
    declaration_kind,
)
from agents_toml.schema.manifest import (
    AutoDiscoverSection,
    ExportsSection,
    Manifest,
    PackageSection,
    collect_issues,
    validate_document,
)
from agents_toml.schema.primitives import (
    ALIAS_RESERVED_CHARS,
    KNOWN_AGENT_IDS,
    AgentId,
    Alias,
    GithubRepo,
    NonEmptyString,
)

__all__ = [
    "ALIAS_RESERVED_CHARS",
    "AgentId",
    "Alias",
    "AutoDiscoverSection",
    "ClaudePluginDeclaration",
    "DependencyDeclaration",
    "ExportsSection",
    "GIT_REF_FIELDS",
    "GitDeclaration",
    "GithubDeclaration",
    "GithubRepo",
    "KNOWN_AGENT_IDS",
    "LocalDeclaration",
    # Manifest models
    "Manifest",
    "NonEmptyString",
    "PackageSection",
    "RegistryDeclaration",
    "collect_issues",
    "declaration_kind",
    # Validation
    "validate_document",
]
