"""Skill discovery over the plugin cache and marketplace trees."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..fs import LocalFilesystem
from ..models.config import MAX_SKILLS
from ..models.skill import SkillInfo
from ..versioning import latest_version

if TYPE_CHECKING:
    from ..fs import FilesystemOps
    from ..models.skill import SkillSource

logger = logging.getLogger(__name__)

SKILL_MARKER = "SKILL.md"


def discover_skills(
    cache_dir: Path,
    marketplaces_dir: Path,
    limit: int = MAX_SKILLS,
    fs: FilesystemOps | None = None,
) -> dict[str, SkillInfo]:
    """Find skills in both trees and merge them by name.

    The cache is scanned first with the full limit; marketplaces only fill
    whatever room is left. On a name collision the cache entry is kept.
    """
    fs = fs or LocalFilesystem()
    cache_skills = find_in_cache(cache_dir, limit, fs)
    remaining = limit - len(cache_skills)
    marketplace_skills = (
        find_in_marketplaces(marketplaces_dir, remaining, fs) if remaining > 0 else []
    )

    skills: dict[str, SkillInfo] = {}
    for skill in cache_skills:
        skills[skill.name] = skill
    for skill in marketplace_skills:
        skills.setdefault(skill.name, skill)
    return skills


def find_in_cache(
    cache_dir: Path, limit: int, fs: FilesystemOps | None = None
) -> list[SkillInfo]:
    """Scan ``{marketplace}/{plugin}/{version}/skills/{skill}`` using only the latest version."""
    fs = fs or LocalFilesystem()
    cache_dir = Path(cache_dir)
    skills: list[SkillInfo] = []
    if not fs.exists(cache_dir):
        return skills
    try:
        marketplaces = fs.listdir(cache_dir)
    except OSError as e:
        logger.warning("Cannot list plugin cache %s: %s", cache_dir, e)
        return skills

    for marketplace in marketplaces:
        if len(skills) >= limit:
            break
        marketplace_path = cache_dir / marketplace
        if not _is_dir(fs, marketplace_path):
            continue
        plugins = _listdir(fs, marketplace_path)
        if plugins is None:
            continue

        for plugin in plugins:
            if len(skills) >= limit:
                break
            plugin_path = marketplace_path / plugin
            if not _is_dir(fs, plugin_path):
                continue
            entries = _listdir(fs, plugin_path)
            if entries is None:
                continue
            versions = [v for v in entries if _is_dir(fs, plugin_path / v)]
            latest = latest_version(versions)
            if latest is None:
                continue
            _collect(fs, plugin_path / latest / "skills", latest, "cache", limit, skills)

    return skills


def find_in_marketplaces(
    marketplaces_dir: Path, limit: int, fs: FilesystemOps | None = None
) -> list[SkillInfo]:
    """Scan ``{marketplace}/plugins/{plugin}/skills/{skill}`` and ``{marketplace}/skills/{skill}``.

    Marketplace checkouts are not versioned, every skill found here carries
    version "latest".
    """
    fs = fs or LocalFilesystem()
    marketplaces_dir = Path(marketplaces_dir)
    skills: list[SkillInfo] = []
    if not fs.exists(marketplaces_dir):
        return skills
    try:
        marketplaces = fs.listdir(marketplaces_dir)
    except OSError as e:
        logger.warning("Cannot list marketplaces %s: %s", marketplaces_dir, e)
        return skills

    for marketplace in marketplaces:
        if len(skills) >= limit:
            break
        marketplace_path = marketplaces_dir / marketplace
        if not _is_dir(fs, marketplace_path):
            continue

        plugins_dir = marketplace_path / "plugins"
        if _is_dir(fs, plugins_dir):
            plugins = _listdir(fs, plugins_dir)
            if plugins is None:
                # an unreadable plugins/ skips the whole marketplace
                continue
            for plugin in plugins:
                if len(skills) >= limit:
                    break
                plugin_path = plugins_dir / plugin
                if not _is_dir(fs, plugin_path):
                    continue
                _collect(fs, plugin_path / "skills", "latest", "marketplaces", limit, skills)

        direct_skills_dir = marketplace_path / "skills"
        if _is_dir(fs, direct_skills_dir):
            _collect(fs, direct_skills_dir, "latest", "marketplaces", limit, skills)

    return skills


# --- internal helpers ---


def _collect(
    fs: FilesystemOps,
    skills_dir: Path,
    version: str,
    source: SkillSource,
    limit: int,
    skills: list[SkillInfo],
) -> None:
    """Append every ``skills_dir/{name}`` holding a SKILL.md, stopping at the limit."""
    if not fs.exists(skills_dir):
        return
    names = _listdir(fs, skills_dir)
    if names is None:
        return
    for name in names:
        if len(skills) >= limit:
            break
        skill_path = skills_dir / name
        if _is_dir(fs, skill_path) and fs.exists(skill_path / SKILL_MARKER):
            skills.append(SkillInfo(name=name, path=skill_path, version=version, source=source))


def _is_dir(fs: FilesystemOps, path: Path) -> bool:
    try:
        return fs.stat(path).is_dir
    except OSError:
        return False


def _listdir(fs: FilesystemOps, path: Path) -> list[str] | None:
    try:
        return fs.listdir(path)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", path, e)
        return None
