"""
Primitive field constraints shared by the manifest schema.

Constraints are declared with ``Annotated`` so they stay visible to
``model_json_schema()`` and other introspection.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, StrictStr, StringConstraints

# Characters reserved for future path-like addressing of dependencies
ALIAS_RESERVED_CHARS: tuple[str, ...] = ("/", "\\", ".", ":")

GITHUB_REPO_PATTERN = r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$"


NonEmptyString = Annotated[
    StrictStr, StringConstraints(strip_whitespace=True, min_length=1)
]
"""String trimmed of surrounding whitespace that must not end up empty."""


def _check_alias(value: str) -> str:
    found = [ch for ch in ALIAS_RESERVED_CHARS if ch in value]
    if found:
        chars = ", ".join(f"'{ch}'" for ch in found)
        raise ValueError(f"Alias cannot contain {chars}")
    return value


Alias = Annotated[
    StrictStr,
    StringConstraints(strip_whitespace=True, min_length=1),
    AfterValidator(_check_alias),
]
"""Dependency alias: non-empty and free of ``/``, ``\\``, ``.`` and ``:``."""

GithubRepo = Annotated[StrictStr, StringConstraints(pattern=GITHUB_REPO_PATTERN)]
"""GitHub repository reference in ``owner/repo`` form."""


class AgentId(str, Enum):
    """Known agent identifiers."""

    CLAUDE_CODE = "claude-code"
    CODEX = "codex"
    OPENCODE = "opencode"


KNOWN_AGENT_IDS: frozenset[str] = frozenset(agent.value for agent in AgentId)
