"""
Dependency resolution and agent filtering.

Turns a structurally valid Manifest into a ValidatedManifest. Each
declaration shape maps to exactly one resolved variant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from agents_toml.errors import DependencyError
from agents_toml.resolver.git import extract_git_ref, normalize_git_url
from agents_toml.resolver.registry import parse_registry_shorthand
from agents_toml.schema.dependencies import (
    ClaudePluginDeclaration,
    GitDeclaration,
    GithubDeclaration,
    LocalDeclaration,
)
from agents_toml.schema.primitives import KNOWN_AGENT_IDS, AgentId
from agents_toml.telemetry import get_logger
from agents_toml.types.dependency import (
    ClaudePluginDependency,
    Dependency,
    GitDependency,
    GithubDependency,
    LocalDependency,
)
from agents_toml.types.manifest import ValidatedManifest

if TYPE_CHECKING:
    from collections.abc import Mapping

    from agents_toml.schema.manifest import Manifest

logger = get_logger(__name__)


def resolve_dependency(alias: str, declaration: Any) -> Dependency:
    """Resolve one dependency declaration.

    Args:
        alias: Dependency alias, used in error messages
        declaration: Registry shorthand string or a declaration model

    Returns:
        The resolved dependency variant

    Raises:
        DependencyError: If the shorthand is malformed or the shape is unknown
    """
    match declaration:
        case str():
            registry = parse_registry_shorthand(declaration)
            if registry is None:
                raise DependencyError(
                    alias,
                    f"Invalid registry dependency format for '{alias}': {declaration}",
                ).with_hint("expected '[@org/]name@version'")
            return registry
        case GithubDeclaration():
            return GithubDependency(
                gh=declaration.gh,
                ref=extract_git_ref(declaration.tag, declaration.branch, declaration.rev),
                path=declaration.path,
            )
        case GitDeclaration():
            url = normalize_git_url(declaration.git)
            logger.debug("Normalized git source", alias=alias, url=url)
            return GitDependency(
                url=url,
                ref=extract_git_ref(declaration.tag, declaration.branch, declaration.rev),
                path=declaration.path,
            )
        case ClaudePluginDeclaration():
            return ClaudePluginDependency(
                plugin=declaration.plugin,
                marketplace=declaration.marketplace,
            )
        case LocalDeclaration():
            return LocalDependency(path=declaration.path)
        case _:
            raise DependencyError(alias, f"Unknown dependency format for '{alias}'")


def filter_agents(agents: Mapping[str, bool]) -> dict[AgentId, bool]:
    """Keep only known agent identifiers.

    Unknown identifiers are dropped without error so that manifests written
    for newer agents still load.
    """
    known: dict[AgentId, bool] = {}
    for agent_id, enabled in agents.items():
        if agent_id in KNOWN_AGENT_IDS:
            known[AgentId(agent_id)] = enabled
        else:
            logger.debug("Ignoring unrecognized agent", agent=agent_id)
    return known


def resolve_manifest(manifest: Manifest) -> ValidatedManifest:
    """Resolve every dependency and filter agents.

    Args:
        manifest: Structurally valid manifest

    Returns:
        ValidatedManifest

    Raises:
        DependencyError: For the first dependency that cannot be resolved
    """
    dependencies = {
        alias: resolve_dependency(alias, declaration)
        for alias, declaration in manifest.dependencies.items()
    }
    return ValidatedManifest(
        agents=filter_agents(manifest.agents),
        dependencies=dependencies,
        package=manifest.package,
        exports=manifest.exports,
    )
