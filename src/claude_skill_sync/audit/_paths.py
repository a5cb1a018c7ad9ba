"""Attribute a skill symlink's target path to the plugin that installed it.

Three layouts are recognised, tried in this order:

- cache:               ``.../cache/{marketplace}/{plugin}/{version}/skills/...``
- marketplace plugin:  ``.../marketplaces/{marketplace}/plugins/{plugin}[/...]``
- marketplace skill:   ``.../marketplaces/{marketplace}/skills/...``

A flat marketplace skill has no plugin segment; it is attributed to
``{marketplace}@{marketplace}``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

_TRAILING_SEPARATORS = re.compile(r"[\\/]+$")


@dataclass(frozen=True)
class PluginRef:
    plugin: str
    marketplace: str

    @property
    def key(self) -> str:
        return f"{self.plugin}@{self.marketplace}"


PathMatcher = Callable[[Sequence[str]], "PluginRef | None"]


def match_cache_path(segments: Sequence[str]) -> PluginRef | None:
    for i, segment in enumerate(segments):
        if segment != "cache" or len(segments) < i + 6:
            continue
        marketplace, plugin = segments[i + 1], segments[i + 2]
        if segments[i + 4] == "skills" and marketplace and plugin:
            return PluginRef(plugin=plugin, marketplace=marketplace)
    return None


def match_marketplace_plugin_path(segments: Sequence[str]) -> PluginRef | None:
    for i, segment in enumerate(segments):
        if segment != "marketplaces" or len(segments) < i + 4:
            continue
        marketplace, plugin = segments[i + 1], segments[i + 3]
        if segments[i + 2] == "plugins" and marketplace and plugin:
            return PluginRef(plugin=plugin, marketplace=marketplace)
    return None


def match_marketplace_skill_path(segments: Sequence[str]) -> PluginRef | None:
    for i, segment in enumerate(segments):
        if segment != "marketplaces" or len(segments) < i + 4:
            continue
        marketplace = segments[i + 1]
        if segments[i + 2] == "skills" and marketplace:
            return PluginRef(plugin=marketplace, marketplace=marketplace)
    return None


PATH_MATCHERS: tuple[PathMatcher, ...] = (
    match_cache_path,
    match_marketplace_plugin_path,
    match_marketplace_skill_path,
)


def split_segments(path: str) -> list[str]:
    """Strip trailing separators, unify backslashes, split on '/'."""
    normalized = _TRAILING_SEPARATORS.sub("", path).replace("\\", "/")
    return normalized.split("/")


def extract_plugin_ref(path: str) -> PluginRef | None:
    """First layout match for ``path``, or None when no layout fits."""
    segments = split_segments(path)
    for matcher in PATH_MATCHERS:
        ref = matcher(segments)
        if ref is not None:
            return ref
    return None


def extract_plugin_name_from_path(path: str) -> str | None:
    """Return ``"{plugin}@{marketplace}"`` for a skill path, or None if unparseable.

    >>> extract_plugin_name_from_path("/cache/mp1/plug1/1.0.0/skills/x")
    'plug1@mp1'
    >>> extract_plugin_name_from_path("/marketplaces/mp/skills/x")
    'mp@mp'
    """
    ref = extract_plugin_ref(path)
    return ref.key if ref is not None else None
