"""
Registry shorthand grammar.

``[@org/]name@version`` where org and name are ``[A-Za-z0-9_-]+`` and the
version is everything after the ``@`` that follows the name. The version may
itself contain ``@``.
"""

from __future__ import annotations

import re

from agents_toml.types.dependency import RegistryDependency

REGISTRY_PATTERN = re.compile(
    r"(?:@(?P<org>[A-Za-z0-9_-]+)/)?(?P<name>[A-Za-z0-9_-]+)@(?P<version>.+)"
)


def parse_registry_shorthand(text: str) -> RegistryDependency | None:
    """Parse a registry shorthand string.

    Args:
        text: Declaration such as ``"superpowers@1.0.0"`` or ``"@org/skill@2.0.0"``

    Returns:
        RegistryDependency, or None when the text does not follow the grammar
    """
    match = REGISTRY_PATTERN.fullmatch(text)
    if match is None:
        return None
    return RegistryDependency(
        name=match["name"],
        version=match["version"],
        org=match["org"],
    )
