"""
Fully resolved manifest type.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from agents_toml.schema.manifest import ExportsSection, PackageSection
    from agents_toml.schema.primitives import AgentId
    from agents_toml.types.dependency import Dependency


@dataclass(frozen=True)
class ValidatedManifest:
    """Normalized agents.toml manifest.

    Attributes:
        agents: Compatibility flags for known agents only
        dependencies: Resolved dependencies keyed by alias
        package: Package metadata, if declared
        exports: Export configuration, if declared

    Both mappings are read-only views.

    Example:
        >>> manifest = parse_or_raise(text)
        >>> manifest.agents[AgentId.CLAUDE_CODE]
        True
        >>> manifest.dependencies["sensei"].ref
        GitRef(kind=<RefKind.TAG: 'tag'>, value='v2.0.0')
    """

    agents: Mapping[AgentId, bool] = field(default_factory=dict)
    dependencies: Mapping[str, Dependency] = field(default_factory=dict)
    package: PackageSection | None = None
    exports: ExportsSection | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "agents", MappingProxyType(dict(self.agents)))
        object.__setattr__(self, "dependencies", MappingProxyType(dict(self.dependencies)))

    @property
    def enabled_agents(self) -> frozenset[AgentId]:
        """Agents explicitly flagged as supported."""
        return frozenset(agent for agent, enabled in self.agents.items() if enabled)

    def to_document(self) -> dict[str, Any]:
        """Render back to the generic document tree of an agents.toml file.

        Validating the returned tree again yields an equal manifest.
        """
        doc: dict[str, Any] = {}
        if self.package is not None:
            doc["package"] = self.package.model_dump(exclude_none=True)
        doc["agents"] = {agent.value: enabled for agent, enabled in self.agents.items()}
        doc["dependencies"] = {
            alias: dep.to_declaration() for alias, dep in self.dependencies.items()
        }
        if self.exports is not None:
            doc["exports"] = self.exports.model_dump(exclude_none=True)
        return doc
