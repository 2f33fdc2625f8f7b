#!/usr/bin/env python3
"""
Manifest validation example.

This example demonstrates parsing an agents.toml file with both the
result-returning and the raising entry points.

Usage:
    export AGENTS_TOML_LOG_LEVEL=DEBUG   # optional
    python examples/validate_manifest.py path/to/agents.toml
"""

import sys

from agents_toml import DependencyKind, ManifestError, parse, parse_file, parse_or_raise
from agents_toml.telemetry import configure_logging_from_env

SAMPLE = """
[package]
name = "sample"
version = "0.1.0"

[agents]
claude-code = true

[dependencies]
superpowers = "superpowers@1.0.0"
sensei = { gh = "sensei-marketplace/sensei", tag = "v2.0.0" }
"""


def describe(path: str) -> int:
    """Print a summary of one manifest file."""
    result = parse_file(path)
    if not result:
        print(f"{path}: {result.error.kind.value}: {result.error.message}")
        return 1

    manifest = result.value
    if manifest.package:
        print(f"Package: {manifest.package.name} {manifest.package.version}")
    print(f"Agents: {', '.join(sorted(a.value for a in manifest.enabled_agents)) or '-'}")
    for alias, dep in manifest.dependencies.items():
        match dep.kind:
            case DependencyKind.REGISTRY:
                print(f"  {alias}: registry {dep.to_declaration()}")
            case DependencyKind.GITHUB | DependencyKind.GIT:
                ref = f" @ {dep.ref.kind.value} {dep.ref.value}" if dep.ref else ""
                print(f"  {alias}: {dep.kind.value} {dep.to_declaration()}{ref}")
            case _:
                print(f"  {alias}: {dep.kind.value} {dep.to_declaration()}")
    return 0


def main() -> int:
    """Run manifest validation example."""
    configure_logging_from_env()

    if len(sys.argv) > 1:
        return max(describe(path) for path in sys.argv[1:])

    # Raising variant: same validation, failures become ManifestError
    try:
        manifest = parse_or_raise(SAMPLE)
    except ManifestError as e:
        print(f"Invalid sample ({e.kind.value}): {e}")
        return 1
    print(f"Sample dependencies: {sorted(manifest.dependencies)}")

    broken = parse('[dependencies.bad]\ngh = "org/repo"\ntag = "v1"\nbranch = "main"\n')
    print(f"Broken sample: {broken.error.kind.value}: {broken.error.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
