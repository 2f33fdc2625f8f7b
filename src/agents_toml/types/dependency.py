"""
Resolved dependency types.

Each dependency variant is an immutable value carrying only normalized
data. ``to_declaration()`` renders a variant back to the manifest shape it
was declared with.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class DependencyKind(str, Enum):
    """Dependency variant discriminator."""

    REGISTRY = "registry"
    GITHUB = "github"
    GIT = "git"
    LOCAL = "local"
    CLAUDE_PLUGIN = "claude-plugin"


class RefKind(str, Enum):
    """Kind of git pointer."""

    TAG = "tag"
    BRANCH = "branch"
    REV = "rev"


@dataclass(frozen=True)
class GitRef:
    """A single git pointer selecting a repository state."""

    kind: RefKind
    value: str


@dataclass(frozen=True)
class RegistryDependency:
    """Package resolved by name and version against a registry.

    Attributes:
        name: Package name
        version: Version requirement, everything after the name's ``@``
        org: Optional owning organization (``@org/`` prefix)
    """

    kind: ClassVar[DependencyKind] = DependencyKind.REGISTRY

    name: str
    version: str
    org: str | None = None

    def to_declaration(self) -> str:
        prefix = f"@{self.org}/" if self.org else ""
        return f"{prefix}{self.name}@{self.version}"


def _ref_fields(ref: GitRef | None, path: str | None) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if ref is not None:
        fields[ref.kind.value] = ref.value
    if path is not None:
        fields["path"] = path
    return fields


@dataclass(frozen=True)
class GithubDependency:
    """Repository hosted on GitHub.

    Attributes:
        gh: Repository in ``owner/repo`` form
        ref: Optional tag, branch or revision
        path: Optional subdirectory inside the repository
    """

    kind: ClassVar[DependencyKind] = DependencyKind.GITHUB

    gh: str
    ref: GitRef | None = None
    path: str | None = None

    @property
    def owner(self) -> str:
        """Repository owner."""
        return self.gh.split("/", 1)[0]

    @property
    def repo(self) -> str:
        """Repository name."""
        return self.gh.split("/", 1)[1]

    def to_declaration(self) -> dict[str, Any]:
        return {"gh": self.gh, **_ref_fields(self.ref, self.path)}


@dataclass(frozen=True)
class GitDependency:
    """Repository reachable by a generic git URL.

    Attributes:
        url: Normalized https URL without a trailing ``.git``
        ref: Optional tag, branch or revision
        path: Optional subdirectory inside the repository
    """

    kind: ClassVar[DependencyKind] = DependencyKind.GIT

    url: str
    ref: GitRef | None = None
    path: str | None = None

    def to_declaration(self) -> dict[str, Any]:
        return {"git": self.url, **_ref_fields(self.ref, self.path)}


@dataclass(frozen=True)
class LocalDependency:
    """Dependency on a local filesystem path."""

    kind: ClassVar[DependencyKind] = DependencyKind.LOCAL

    path: str

    def to_declaration(self) -> dict[str, Any]:
        return {"path": self.path}


@dataclass(frozen=True)
class ClaudePluginDependency:
    """Plugin installed from a Claude plugin marketplace."""

    kind: ClassVar[DependencyKind] = DependencyKind.CLAUDE_PLUGIN

    plugin: str
    marketplace: str

    def to_declaration(self) -> dict[str, Any]:
        return {
            "type": DependencyKind.CLAUDE_PLUGIN.value,
            "plugin": self.plugin,
            "marketplace": self.marketplace,
        }


Dependency = Union[
    RegistryDependency,
    GithubDependency,
    GitDependency,
    LocalDependency,
    ClaudePluginDependency,
]
