"""
Type definitions for agents-toml.

Provides the immutable, normalized values produced by a successful parse.
"""

from agents_toml.types.dependency import (
    ClaudePluginDependency,
    Dependency,
    DependencyKind,
    GitDependency,
    GithubDependency,
    GitRef,
    LocalDependency,
    RefKind,
    RegistryDependency,
)
from agents_toml.types.manifest import ValidatedManifest

__all__ = [
    "ClaudePluginDependency",
    "Dependency",
    "DependencyKind",
    "GitDependency",
    "GitRef",
    "GithubDependency",
    "LocalDependency",
    "RefKind",
    "RegistryDependency",
    "ValidatedManifest",
]
