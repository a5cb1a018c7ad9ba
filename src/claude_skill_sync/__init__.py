"""Mirror Claude Code plugin skills into a flat directory of symlinks."""

from ._sync import LogSink, audit_orphans, start_background_sync, sync_skills
from .audit import (
    InstalledPlugins,
    ManifestUnreadable,
    PluginRef,
    cleanup_orphaned_symlinks,
    extract_plugin_name_from_path,
    extract_plugin_ref,
    load_installed_plugins,
    read_installed_plugins,
)
from .discovery import discover_skills, find_in_cache, find_in_marketplaces
from .errors import LoadError
from .fs import EntryStat, FilesystemOps, InMemoryFilesystem, LocalFilesystem
from .loaders import load_config
from .models import (
    MAX_SKILLS,
    AuditResult,
    EntryFailure,
    InstalledPluginsManifest,
    ReconcileResult,
    SkillInfo,
    SyncConfig,
    SyncSummary,
)
from .reconcile import reconcile_symlinks
from .versioning import compare_versions, parse_version

__all__ = [
    "MAX_SKILLS",
    "AuditResult",
    "EntryFailure",
    "EntryStat",
    "FilesystemOps",
    "InMemoryFilesystem",
    "InstalledPlugins",
    "InstalledPluginsManifest",
    "LoadError",
    "LocalFilesystem",
    "LogSink",
    "ManifestUnreadable",
    "PluginRef",
    "ReconcileResult",
    "SkillInfo",
    "SyncConfig",
    "SyncSummary",
    "audit_orphans",
    "cleanup_orphaned_symlinks",
    "compare_versions",
    "discover_skills",
    "extract_plugin_name_from_path",
    "extract_plugin_ref",
    "find_in_cache",
    "find_in_marketplaces",
    "load_config",
    "load_installed_plugins",
    "parse_version",
    "read_installed_plugins",
    "reconcile_symlinks",
    "start_background_sync",
    "sync_skills",
]
