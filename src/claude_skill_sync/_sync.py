"""Sync entry points: discover, reconcile, optionally audit, report."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from .audit import ManifestUnreadable, cleanup_orphaned_symlinks, load_installed_plugins
from .discovery import discover_skills
from .fs import LocalFilesystem
from .models.config import SyncConfig
from .models.results import AuditResult, SyncSummary
from .reconcile import reconcile_symlinks

if TYPE_CHECKING:
    from .fs import FilesystemOps

logger = logging.getLogger(__name__)

LogSink = Callable[[str], None]


def sync_skills(
    config: SyncConfig | None = None,
    log: LogSink | None = None,
    fs: FilesystemOps | None = None,
) -> SyncSummary:
    """Run one sync pass and report a one-line summary through ``log``.

    config: defaults to SyncConfig.from_home()
    log: receives the summary messages; defaults to this module's logger at INFO
    fs: defaults to the local filesystem
    """
    config = config or SyncConfig.from_home()
    fs = fs or LocalFilesystem()
    emit = log or logger.info
    limit = config.max_skills

    if not fs.exists(config.claude_dir):
        emit("Claude Code not installed, skipping")
        return SyncSummary(status="claude-missing", limit=limit)

    skills = discover_skills(config.cache_dir, config.marketplaces_dir, limit, fs)
    found = len(skills)
    if found == 0:
        emit("No skills found")
        return SyncSummary(status="no-skills", limit=limit)

    try:
        reconcile = reconcile_symlinks(config.target_dir, skills, fs)
    except OSError as e:
        logger.warning("Cannot prepare target directory %s: %s", config.target_dir, e)
        emit(f"Sync failed: {e}")
        return SyncSummary(status="failed", found=found, limit=limit, error=str(e))
    audit = _run_audit(config, fs) if config.prune_orphans else None

    summary = SyncSummary(
        status="synced", found=found, limit=limit, reconcile=reconcile, audit=audit
    )
    message = (
        f"Synced {found} skills (limit: {limit}): "
        f"{reconcile.created} created, {reconcile.updated} updated, {reconcile.cleaned} cleaned"
    )
    if audit is not None and not audit.aborted:
        message += f", {audit.removed} orphaned removed"
    if summary.failures:
        message += f", {len(summary.failures)} failed"
    emit(message)
    return summary


def audit_orphans(
    config: SyncConfig | None = None,
    log: LogSink | None = None,
    fs: FilesystemOps | None = None,
) -> AuditResult:
    """Run only the orphan audit against the installed plugins manifest."""
    config = config or SyncConfig.from_home()
    fs = fs or LocalFilesystem()
    emit = log or logger.info

    result = _run_audit(config, fs)
    if result.aborted:
        emit("Orphan cleanup skipped")
    else:
        emit(f"Removed {result.removed} orphaned skill links ({result.kept} kept)")
    return result


def start_background_sync(
    config: SyncConfig | None = None,
    log: LogSink | None = None,
    fs: FilesystemOps | None = None,
) -> threading.Thread:
    """Start ``sync_skills`` on a daemon thread and return immediately.

    Errors never reach the caller; they are logged.
    """

    def _run() -> None:
        try:
            sync_skills(config, log, fs)
        except Exception:
            logger.exception("Background skill sync failed")

    thread = threading.Thread(target=_run, name="claude-skill-sync", daemon=True)
    thread.start()
    return thread


def _run_audit(config: SyncConfig, fs: FilesystemOps) -> AuditResult:
    if config.installed_plugins_file is None:
        return cleanup_orphaned_symlinks(
            config.target_dir, ManifestUnreadable("No installed plugins file configured"), fs
        )
    installed = load_installed_plugins(config.installed_plugins_file, fs)
    return cleanup_orphaned_symlinks(config.target_dir, installed, fs)
