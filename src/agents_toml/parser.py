"""
agents.toml parser.

Runs the three pipeline stages in order and reports any failure as a value:

1. TOML text → document tree (``invalid_toml``)
2. Document tree → structural Manifest (``invalid_manifest``)
3. Manifest → ValidatedManifest (``invalid_dependency``)

A later stage never runs after an earlier one fails. ``parse_or_raise`` is
the same pipeline with failures raised as ``ManifestError``.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from agents_toml.errors import (
    DependencyError,
    ManifestError,
    ParseErrorKind,
    StructuralError,
)
from agents_toml.resolver import resolve_manifest
from agents_toml.schema import validate_document
from agents_toml.telemetry import get_logger

if TYPE_CHECKING:
    import os

    from agents_toml.types import ValidatedManifest

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParseError:
    """Failure descriptor.

    Attributes:
        kind: Pipeline stage that failed
        message: Human-readable description
        cause: Underlying exception, if any (ignored in comparisons)
    """

    kind: ParseErrorKind
    message: str
    cause: BaseException | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a parse: a value on success, an error otherwise.

    Truthy on success.

    Example:
        >>> result = parse(text)
        >>> if result:
        ...     print(result.value.package)
        ... else:
        ...     print(result.error.kind, result.error.message)
    """

    value: T | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """Whether the parse succeeded."""
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, or raise the error as ManifestError.

        Raises:
            ManifestError: Carrying the error's kind, with its message as text
        """
        if self.error is not None:
            raise ManifestError(
                self.error.message, self.error.kind, cause=self.error.cause
            ) from self.error.cause
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ParseErrorKind,
        message: str,
        cause: BaseException | None = None,
    ) -> ParseResult[T]:
        return cls(error=ParseError(kind=kind, message=message, cause=cause))


def parse_document(raw: Any) -> ParseResult[ValidatedManifest]:
    """Validate and resolve an already-parsed document tree.

    Args:
        raw: Document tree, e.g. from ``tomllib.loads``

    Returns:
        ParseResult holding a ValidatedManifest or an
        ``invalid_manifest`` / ``invalid_dependency`` error
    """
    try:
        manifest = validate_document(raw)
    except StructuralError as exc:
        logger.debug(
            "Manifest failed schema validation", issues=len(exc.issues)
        )
        return ParseResult.failure(
            ParseErrorKind.INVALID_MANIFEST, f"Invalid manifest: {exc.summary()}", exc
        )

    try:
        validated = resolve_manifest(manifest)
    except DependencyError as exc:
        logger.debug("Dependency could not be resolved", alias=exc.alias)
        return ParseResult.failure(ParseErrorKind.INVALID_DEPENDENCY, exc.message, exc)

    logger.debug(
        "Manifest parsed",
        agents=len(validated.agents),
        dependencies=len(validated.dependencies),
    )
    return ParseResult.success(validated)


def parse(contents: str) -> ParseResult[ValidatedManifest]:
    """Parse and validate agents.toml text.

    Args:
        contents: TOML document text

    Returns:
        ParseResult holding a ValidatedManifest or a ParseError
    """
    try:
        raw = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as exc:
        logger.debug("Manifest is not valid TOML", error=str(exc))
        return ParseResult.failure(ParseErrorKind.INVALID_TOML, str(exc), exc)
    return parse_document(raw)


def parse_file(path: str | os.PathLike[str]) -> ParseResult[ValidatedManifest]:
    """Read and parse a single agents.toml file.

    Args:
        path: Path of the file to read

    Returns:
        ParseResult; bytes that are not UTF-8 are reported as ``invalid_toml``

    Raises:
        OSError: If the file cannot be read
    """
    data = Path(path).read_bytes()
    try:
        contents = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        return ParseResult.failure(
            ParseErrorKind.INVALID_TOML, f"Manifest is not valid UTF-8: {exc}", exc
        )
    logger.debug("Parsing manifest file", source=str(path))
    return parse(contents)


def parse_or_raise(contents: str) -> ValidatedManifest:
    """Parse and validate agents.toml text, raising on failure.

    Raises:
        ManifestError: With the failure's message and kind
    """
    return parse(contents).unwrap()
