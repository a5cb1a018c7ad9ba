"""Concrete adapter for the local filesystem."""

from __future__ import annotations

import os
import stat as stat_mod
from typing import TYPE_CHECKING

from ._protocols import EntryStat

if TYPE_CHECKING:
    from pathlib import Path


class LocalFilesystem:
    """Thin wrapper over the ``os`` module. Directory listings are sorted by name."""

    def exists(self, path: Path) -> bool:
        # os.path.exists follows links, so a dangling link reports False
        return os.path.exists(path)

    def listdir(self, path: Path) -> list[str]:
        return sorted(os.listdir(path))

    def stat(self, path: Path) -> EntryStat:
        st = os.stat(path)
        return EntryStat(is_dir=stat_mod.S_ISDIR(st.st_mode))

    def lstat(self, path: Path) -> EntryStat:
        st = os.lstat(path)
        return EntryStat(
            is_dir=stat_mod.S_ISDIR(st.st_mode),
            is_symlink=stat_mod.S_ISLNK(st.st_mode),
        )

    def readlink(self, path: Path) -> str:
        return os.readlink(os.fspath(path))

    def read_text(self, path: Path) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def makedirs(self, path: Path) -> None:
        os.makedirs(path, exist_ok=True)

    def symlink(self, target: Path | str, link_path: Path) -> None:
        os.symlink(target, link_path)

    def unlink(self, path: Path) -> None:
        os.unlink(path)
