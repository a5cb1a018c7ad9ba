"""Ordering for the ``major.minor.patch`` directory names found in the plugin cache."""

from __future__ import annotations

import functools
import re

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)")


def parse_version(version: str) -> tuple[int, int, int]:
    """Return the leading ``(major, minor, patch)`` of a version string.

    Trailing text after the third number is ignored ("1.2.3-beta" -> (1, 2, 3)).
    Anything that does not start with three dot-separated numbers returns
    (0, 0, 0) so it sorts before every real version.
    """
    match = _VERSION_RE.match(version)
    if match is None:
        return (0, 0, 0)
    return (int(match.group(1)), int(match.group(2)), int(match.group(3)))


def compare_versions(a: str, b: str) -> int:
    """Negative if a < b, zero if equal, positive if a > b.

    Two unparseable strings compare equal whatever their text.
    """
    va = parse_version(a)
    vb = parse_version(b)
    for x, y in zip(va, vb):
        if x != y:
            return x - y
    return 0


version_key = functools.cmp_to_key(compare_versions)


def latest_version(versions: list[str]) -> str | None:
    """Greatest version in listing order; ties keep the later entry."""
    if not versions:
        return None
    return sorted(versions, key=version_key)[-1]
