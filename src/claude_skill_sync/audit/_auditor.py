"""Remove skill symlinks whose plugin is no longer installed."""

from __future__ import annotations

import logging
import os
import posixpath
import re
from pathlib import Path
from typing import TYPE_CHECKING

from ..fs import LocalFilesystem
from ..models.results import AuditResult, EntryFailure
from ._manifest import InstalledPlugins, ManifestUnreadable
from ._paths import extract_plugin_name_from_path

if TYPE_CHECKING:
    from collections.abc import Set

    from ..fs import FilesystemOps

logger = logging.getLogger(__name__)

_DRIVE_PATH = re.compile(r"^[A-Za-z]:")


def resolve_link_target(link_path: Path, raw_target: str) -> str:
    """Absolute, ``..``-free form of a link target, relative targets taken from the link's directory."""
    if raw_target.startswith("/") or _DRIVE_PATH.match(raw_target):
        return raw_target
    base = os.path.abspath(os.path.dirname(os.fspath(link_path)))
    return posixpath.normpath(posixpath.join(base.replace("\\", "/"), raw_target))


def cleanup_orphaned_symlinks(
    target_dir: Path,
    installed: InstalledPlugins | ManifestUnreadable | Set[str],
    fs: FilesystemOps | None = None,
) -> AuditResult:
    """Unlink every symlink in ``target_dir`` not attributable to an installed plugin.

    Args:
        target_dir: Directory holding the skill symlinks.
        installed: Result of read_installed_plugins, or a plain set of
            ``name@marketplace`` keys. ManifestUnreadable makes this a no-op.
        fs: Filesystem operations (defaults to the local filesystem).

    Returns:
        AuditResult; ``aborted`` is set when the manifest was unreadable or the
        directory could not be listed, in which case nothing was removed.
    """
    fs = fs or LocalFilesystem()
    target_dir = Path(target_dir)
    result = AuditResult()

    if isinstance(installed, ManifestUnreadable):
        logger.warning("Skipping orphan cleanup: %s", installed.reason)
        result.aborted = True
        return result
    keys = installed.keys if isinstance(installed, InstalledPlugins) else installed

    try:
        entries = fs.listdir(target_dir)
    except OSError as e:
        logger.warning("Skipping orphan cleanup, cannot list %s: %s", target_dir, e)
        result.aborted = True
        result.failures.append(EntryFailure(str(target_dir), "listdir", str(e)))
        return result

    for entry in entries:
        entry_path = target_dir / entry
        operation = "lstat"
        try:
            if not fs.lstat(entry_path).is_symlink:
                result.skipped += 1
                continue

            operation = "readlink"
            target = resolve_link_target(entry_path, fs.readlink(entry_path))
            plugin_key = extract_plugin_name_from_path(target)

            if plugin_key is not None and plugin_key in keys:
                result.kept += 1
                continue

            operation = "unlink"
            fs.unlink(entry_path)
            result.removed += 1
            logger.debug("Removed orphaned %s -> %s (%s)", entry_path, target, plugin_key)
        except OSError as e:
            logger.debug("Skipping %s (%s failed): %s", entry_path, operation, e)
            result.failures.append(EntryFailure(str(entry_path), operation, str(e)))

    return result
