"""
Dependency declaration shapes.

A declaration is either a registry shorthand string or one of four closed
tables. The table shape is selected by its identifying key, so validation
errors point at the one shape the author meant rather than at every
alternative of the union.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Self, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StrictStr,
    Tag,
    model_validator,
)

from agents_toml.schema.primitives import GithubRepo, NonEmptyString
from agents_toml.types.dependency import DependencyKind

GIT_REF_FIELDS: tuple[str, ...] = ("tag", "branch", "rev")

# Identifying key of each table shape, in discrimination order
_SHAPE_KEYS: tuple[tuple[str, DependencyKind], ...] = (
    ("gh", DependencyKind.GITHUB),
    ("git", DependencyKind.GIT),
    ("type", DependencyKind.CLAUDE_PLUGIN),
    ("path", DependencyKind.LOCAL),
)

RegistryDeclaration = StrictStr
"""Registry shorthand ``[@org/]name@version``; the grammar is checked on resolve."""


class _GitSourceDeclaration(BaseModel):
    """Fields shared by repository-backed declarations."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tag: NonEmptyString | None = Field(default=None, description="Git tag")
    branch: NonEmptyString | None = Field(default=None, description="Git branch")
    rev: NonEmptyString | None = Field(default=None, description="Git commit revision")
    path: NonEmptyString | None = Field(
        default=None, description="Subdirectory inside the repository"
    )

    @model_validator(mode="after")
    def _check_single_ref(self) -> Self:
        given = [name for name in GIT_REF_FIELDS if getattr(self, name) is not None]
        if len(given) > 1:
            names = ", ".join(f"'{name}'" for name in given)
            raise ValueError(
                f"Only one of 'tag', 'branch', or 'rev' can be specified (got {names})"
            )
        return self


class GithubDeclaration(_GitSourceDeclaration):
    """``{gh = "owner/repo", tag|branch|rev?, path?}``"""

    kind: ClassVar[DependencyKind] = DependencyKind.GITHUB

    gh: GithubRepo = Field(description="GitHub repository as 'owner/repo'")


class GitDeclaration(_GitSourceDeclaration):
    """``{git = "<url>", tag|branch|rev?, path?}``"""

    kind: ClassVar[DependencyKind] = DependencyKind.GIT

    git: NonEmptyString = Field(description="Git clone URL (https, http or ssh)")


class LocalDeclaration(BaseModel):
    """``{path = "<dir>"}``"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ClassVar[DependencyKind] = DependencyKind.LOCAL

    path: NonEmptyString = Field(description="Local filesystem path")


class ClaudePluginDeclaration(BaseModel):
    """``{type = "claude-plugin", plugin, marketplace}``"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ClassVar[DependencyKind] = DependencyKind.CLAUDE_PLUGIN

    type: Literal["claude-plugin"] = Field(description="Dependency type marker")
    plugin: NonEmptyString = Field(description="Plugin name")
    marketplace: NonEmptyString = Field(description="Marketplace providing the plugin")


def declaration_kind(value: Any) -> str | None:
    """Select the declaration shape for a raw dependency value.

    Returns the shape tag, or None when the value has no identifying key.
    """
    if isinstance(value, str):
        return DependencyKind.REGISTRY.value
    if isinstance(value, dict):
        for key, kind in _SHAPE_KEYS:
            if key in value:
                return kind.value
        return None
    kind = getattr(value, "kind", None)
    if isinstance(kind, DependencyKind):
        return kind.value
    return None


DependencyDeclaration = Annotated[
    Union[
        Annotated[RegistryDeclaration, Tag(DependencyKind.REGISTRY.value)],
        Annotated[GithubDeclaration, Tag(DependencyKind.GITHUB.value)],
        Annotated[GitDeclaration, Tag(DependencyKind.GIT.value)],
        Annotated[ClaudePluginDeclaration, Tag(DependencyKind.CLAUDE_PLUGIN.value)],
        Annotated[LocalDeclaration, Tag(DependencyKind.LOCAL.value)],
    ],
    Discriminator(
        declaration_kind,
        custom_error_type="dependency_shape",
        custom_error_message=(
            "Dependency must be a '[@org/]name@version' string or a table with "
            "'gh', 'git', 'path', or type = 'claude-plugin'"
        ),
    ),
]
"""Any dependency declaration, tagged by its shape."""
