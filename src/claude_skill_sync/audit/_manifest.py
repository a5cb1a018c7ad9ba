"""Read the installed-plugins manifest without ever mistaking "unreadable" for "empty"."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..fs import LocalFilesystem
from ..models.state import InstalledPluginsManifest

if TYPE_CHECKING:
    from ..fs import FilesystemOps

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstalledPlugins:
    """A readable manifest. ``keys`` may legitimately be empty."""

    keys: frozenset[str]

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)


@dataclass(frozen=True)
class ManifestUnreadable:
    """The manifest could not be trusted; callers must not remove anything."""

    reason: str


ManifestResult = InstalledPlugins | ManifestUnreadable


def read_installed_plugins(content: str) -> ManifestResult:
    """Parse installed_plugins.json content.

    Returns ManifestUnreadable for invalid JSON, a non-object root, or a
    ``plugins`` value that is missing or not an object.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        return ManifestUnreadable(f"Invalid JSON: {e}")
    if not isinstance(data, dict):
        return ManifestUnreadable("Manifest root is not an object")
    try:
        manifest = InstalledPluginsManifest.model_validate(data)
    except ValidationError as e:
        return ManifestUnreadable(f"Invalid manifest: {e.error_count()} error(s)")
    return InstalledPlugins(keys=frozenset(manifest.plugins))


def load_installed_plugins(path: Path, fs: FilesystemOps | None = None) -> ManifestResult:
    """Read and parse installed_plugins.json through ``fs``. A missing file is unreadable."""
    fs = fs or LocalFilesystem()
    path = Path(path)
    try:
        content = fs.read_text(path)
    except OSError as e:
        return ManifestUnreadable(f"Cannot read {path}: {e}")
    result = read_installed_plugins(content)
    if isinstance(result, ManifestUnreadable):
        logger.warning("Ignoring installed plugins manifest %s: %s", path, result.reason)
    return result
