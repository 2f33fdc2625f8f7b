"""
Manifest models for the agents.toml file.

These Pydantic models represent the structural shape of a manifest. Every
table is closed: keys outside the declared field set are rejected at any
depth. The ``agents`` table is the one open mapping; unknown agent ids are
filtered later, on resolve.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic import ValidationError as PydanticValidationError

from agents_toml.errors import Issue, StructuralError
from agents_toml.schema.dependencies import DependencyDeclaration
from agents_toml.schema.primitives import Alias, NonEmptyString
from agents_toml.types.dependency import DependencyKind

_SHAPE_TAGS: frozenset[str] = frozenset(kind.value for kind in DependencyKind)


class PackageSection(BaseModel):
    """Package metadata."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: NonEmptyString = Field(description="Package name")
    version: NonEmptyString = Field(description="Package version")
    description: NonEmptyString | None = Field(
        default=None, description="Short package description"
    )
    license: NonEmptyString | None = Field(default=None, description="License identifier")
    org: NonEmptyString | None = Field(default=None, description="Owning organization")


def _require_false(value: bool) -> bool:
    if value:
        raise ValueError("Input should be a directory or false")
    return value


Disabled = Annotated[StrictBool, AfterValidator(_require_false)]
"""Literal ``false``; other booleans and numbers are rejected."""


class AutoDiscoverSection(BaseModel):
    """Automatic export discovery."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    skills: NonEmptyString | Disabled | None = Field(
        default=None,
        description="Directory to discover skills from, or false to disable discovery",
    )


class ExportsSection(BaseModel):
    """Export configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    auto_discover: AutoDiscoverSection | None = Field(
        default=None, description="Automatic discovery settings"
    )


class Manifest(BaseModel):
    """Structurally validated agents.toml document.

    Example:
        >>> manifest = Manifest.model_validate(tomllib.loads(text))
        >>> print(manifest.package.name)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    package: PackageSection | None = Field(default=None, description="Package metadata")
    agents: dict[str, StrictBool] = Field(
        default_factory=dict, description="Agent compatibility flags"
    )
    dependencies: dict[Alias, DependencyDeclaration] = Field(
        default_factory=dict, description="Dependency declarations keyed by alias"
    )
    exports: ExportsSection | None = Field(default=None, description="Export configuration")

    @field_validator("dependencies", mode="before")
    @classmethod
    def reject_duplicate_aliases(cls, v: Any) -> Any:
        """Reject aliases that collide once surrounding whitespace is trimmed."""
        if not isinstance(v, dict):
            return v
        seen: set[str] = set()
        for key in v:
            if not isinstance(key, str):
                continue
            alias = key.strip()
            if alias in seen:
                raise ValueError(f"Duplicate alias '{alias}' after trimming whitespace")
            seen.add(alias)
        return v


def _format_loc(loc: tuple[int | str, ...]) -> str:
    # dependencies.<alias>.<shape tag>: the tag is not part of the document
    if len(loc) > 2 and loc[0] == "dependencies" and loc[2] in _SHAPE_TAGS:
        loc = loc[:2] + loc[3:]
    if not loc:
        return "(root)"
    return ".".join(str(part) for part in loc)


def collect_issues(exc: PydanticValidationError) -> list[Issue]:
    """Convert every pydantic error into a path-qualified issue."""
    return [
        Issue(path=_format_loc(err["loc"]), message=err["msg"])
        for err in exc.errors(include_url=False)
    ]


def validate_document(raw: Any) -> Manifest:
    """Validate a generic document tree against the manifest schema.

    Args:
        raw: Tree of dicts, lists and scalars produced by a TOML reader

    Returns:
        Structurally valid Manifest

    Raises:
        StructuralError: With every violated constraint found in one pass
    """
    try:
        return Manifest.model_validate(raw)
    except PydanticValidationError as exc:
        raise StructuralError(collect_issues(exc)) from exc
