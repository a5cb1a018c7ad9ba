"""Bring the target directory's symlinks in line with the discovered skills."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from ..fs import LocalFilesystem
from ..models.results import EntryFailure, ReconcileResult

if TYPE_CHECKING:
    from ..fs import FilesystemOps
    from ..models.skill import SkillInfo

logger = logging.getLogger(__name__)


def reconcile_symlinks(
    target_dir: Path,
    skills: Mapping[str, SkillInfo],
    fs: FilesystemOps | None = None,
) -> ReconcileResult:
    """Create, repoint and remove links so ``target_dir/{name}`` -> ``skill.path``.

    Only symlinks are ever touched; plain files and directories in the target
    directory are left alone. ``skills`` is not modified. Skills whose link could
    not be created come back in ``result.pending``.

    A link is cleaned when its target is gone or when no skill has its name. A
    name cleaned this way is not re-created in the same pass.

    Raises OSError only when ``target_dir`` is missing and cannot be created.
    """
    fs = fs or LocalFilesystem()
    target_dir = Path(target_dir)
    result = ReconcileResult()

    if not fs.exists(target_dir):
        fs.makedirs(target_dir)

    remaining = _reconcile_existing(target_dir, dict(skills), fs, result)
    result.pending = _create_missing(target_dir, remaining, fs, result)
    return result


def _reconcile_existing(
    target_dir: Path,
    remaining: dict[str, SkillInfo],
    fs: FilesystemOps,
    result: ReconcileResult,
) -> dict[str, SkillInfo]:
    try:
        entries = fs.listdir(target_dir)
    except OSError as e:
        logger.warning("Cannot list target directory %s: %s", target_dir, e)
        result.failures.append(EntryFailure(str(target_dir), "listdir", str(e)))
        return remaining

    for entry in entries:
        entry_path = target_dir / entry
        operation = "lstat"
        try:
            if not fs.lstat(entry_path).is_symlink:
                continue

            operation = "readlink"
            current_target = fs.readlink(entry_path)
            skill = remaining.get(entry)

            # exists() follows the link, so a dangling link reads as missing
            if skill is None or not fs.exists(entry_path):
                operation = "unlink"
                fs.unlink(entry_path)
                result.cleaned += 1
                remaining.pop(entry, None)
                logger.debug("Cleaned %s -> %s", entry_path, current_target)
                continue

            if current_target != str(skill.path):
                operation = "unlink"
                fs.unlink(entry_path)
                operation = "symlink"
                fs.symlink(skill.path, entry_path)
                result.updated += 1
                logger.debug("Updated %s: %s -> %s", entry_path, current_target, skill.path)

            del remaining[entry]
        except OSError as e:
            logger.debug("Skipping %s (%s failed): %s", entry_path, operation, e)
            result.failures.append(EntryFailure(str(entry_path), operation, str(e)))

    return remaining


def _create_missing(
    target_dir: Path,
    remaining: dict[str, SkillInfo],
    fs: FilesystemOps,
    result: ReconcileResult,
) -> dict[str, SkillInfo]:
    pending: dict[str, SkillInfo] = {}
    for name, skill in remaining.items():
        link_path = target_dir / name
        try:
            fs.symlink(skill.path, link_path)
        except OSError as e:
            logger.debug("Could not link %s -> %s: %s", link_path, skill.path, e)
            result.failures.append(EntryFailure(str(link_path), "symlink", str(e)))
            pending[name] = skill
            continue
        result.created += 1
    return pending
