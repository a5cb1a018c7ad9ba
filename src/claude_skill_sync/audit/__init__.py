"""Orphan audit: prune skill symlinks left behind by uninstalled plugins."""

from ._auditor import cleanup_orphaned_symlinks, resolve_link_target
from ._manifest import (
    InstalledPlugins,
    ManifestResult,
    ManifestUnreadable,
    load_installed_plugins,
    read_installed_plugins,
)
from ._paths import (
    PATH_MATCHERS,
    PluginRef,
    extract_plugin_name_from_path,
    extract_plugin_ref,
    match_cache_path,
    match_marketplace_plugin_path,
    match_marketplace_skill_path,
)

__all__ = [
    "PATH_MATCHERS",
    "InstalledPlugins",
    "ManifestResult",
    "ManifestUnreadable",
    "PluginRef",
    "cleanup_orphaned_symlinks",
    "extract_plugin_name_from_path",
    "extract_plugin_ref",
    "load_installed_plugins",
    "match_cache_path",
    "match_marketplace_plugin_path",
    "match_marketplace_skill_path",
    "read_installed_plugins",
    "resolve_link_target",
]
