"""错误基类：提供分层错误体系和结构化错误上下文。

Base error classes for agents-toml.

Provides a layered error hierarchy:
- AgentsTomlError: Base class for all library errors
- StructuralError: Schema violations collected from a manifest document
- DependencyError: A dependency declaration that cannot be resolved
- ManifestError: Raised by the throwing parse entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from agents_toml.errors.kinds import ParseErrorKind


@dataclass
class ErrorContext:
    """Structured error context for diagnostics.

    Provides actionable information for debugging and error handling.
    """

    field_path: str | None = None
    """Path to the problematic field (e.g., 'dependencies.sensei')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'schema', 'resolver', 'parser')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class AgentsTomlError(Exception):
    """Base class for all agents-toml errors.

    All errors from this library inherit from this class, making it easy
    to catch all library errors with a single except clause.

    Attributes:
        message: Human-readable error message
        context: Optional structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> AgentsTomlError:
        """Add a hint to this error."""
        self.context.hint = hint
        return self


@dataclass(frozen=True)
class Issue:
    """A single violated constraint, located by its dotted document path."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class StructuralError(AgentsTomlError):
    """Manifest document does not match the declared schema.

    Raised when:
    - A required field is missing
    - A field has the wrong type or is empty after trimming
    - An object carries a key outside its declared field set
    - A git dependency names more than one of tag/branch/rev

    Every violation found in one validation pass is kept in ``issues``.
    """

    def __init__(
        self,
        issues: Iterable[Issue],
        context: ErrorContext | None = None,
    ) -> None:
        self.issues = tuple(issues)
        ctx = context or ErrorContext(source="schema")
        ctx.details["issue_count"] = len(self.issues)
        super().__init__(self.summary(), ctx)

    def summary(self) -> str:
        """Join every issue as ``path: message`` separated by ``; ``."""
        return "; ".join(str(issue) for issue in self.issues)


class DependencyError(AgentsTomlError):
    """A dependency declaration could not be resolved.

    Raised when:
    - A string entry does not follow the ``[@org/]name@version`` grammar
    - An object entry matches none of the supported shapes
    """

    def __init__(
        self,
        alias: str,
        reason: str,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="resolver")
        ctx.field_path = f"dependencies.{alias}"
        super().__init__(reason, ctx)
        self.alias = alias
        self.reason = reason


class ManifestError(AgentsTomlError):
    """Parsing a manifest failed.

    Only the throwing entry point raises this; the result-returning entry
    point reports the same failure as a value. ``str(error)`` is exactly the
    failure message.
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.context.details["kind"] = kind.value
        self.__cause__ = cause
