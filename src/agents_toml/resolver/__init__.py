"""
Resolver layer - normalization of structurally valid manifests.

This module handles:
- Registry shorthand parsing
- Git URL normalization and ref selection
- Dispatch from declaration shapes to resolved dependency variants
- Filtering of agent identifiers against the known set
"""

from agents_toml.resolver.core import (
    filter_agents,
    resolve_dependency,
    resolve_manifest,
)
from agents_toml.resolver.git import extract_git_ref, normalize_git_url
from agents_toml.resolver.registry import REGISTRY_PATTERN, parse_registry_shorthand

__all__ = [
    "REGISTRY_PATTERN",
    "extract_git_ref",
    "filter_agents",
    "normalize_git_url",
    "parse_registry_shorthand",
    "resolve_dependency",
    "resolve_manifest",
]
