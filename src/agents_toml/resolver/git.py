"""
Git URL normalization and ref selection.
"""

from __future__ import annotations

import re

from agents_toml.types.dependency import GitRef, RefKind

# scp-like shorthand: user@host:owner/repo
_SSH_SHORTHAND = re.compile(r"(?P<user>[^@/\s]+)@(?P<host>[^:/\s]+):(?P<path>.+)")
_HTTP_SCHEME = re.compile(r"http://", re.IGNORECASE)


def normalize_git_url(url: str) -> str:
    """Normalize a git clone URL to https.

    - ``git@github.com:org/repo.git`` becomes ``https://github.com/org/repo``
    - ``http://`` (any case) becomes ``https://``
    - A trailing ``.git`` is stripped after the scheme is rewritten

    Other URLs are returned unchanged apart from the ``.git`` suffix.
    """
    match = _SSH_SHORTHAND.fullmatch(url)
    if match is not None:
        url = f"https://{match['host']}/{match['path'].lstrip('/')}"
    elif _HTTP_SCHEME.match(url):
        url = "https://" + url[len("http://"):]

    if url.endswith(".git"):
        url = url[: -len(".git")]
    return url


def extract_git_ref(
    tag: str | None = None,
    branch: str | None = None,
    rev: str | None = None,
) -> GitRef | None:
    """Pick the git ref, checking tag, then branch, then rev.

    Returns:
        The first non-empty ref, or None when none is given
    """
    if tag:
        return GitRef(RefKind.TAG, tag)
    if branch:
        return GitRef(RefKind.BRANCH, branch)
    if rev:
        return GitRef(RefKind.REV, rev)
    return None
