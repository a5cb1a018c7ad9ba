"""Protocols (ports) for the filesystem operations the sync engine performs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class EntryStat:
    """The two facts the engine needs from a stat call."""

    is_dir: bool
    is_symlink: bool = False


class FilesystemOps(Protocol):
    """Every filesystem call made by discovery, reconciliation and audit.

    All methods except ``exists`` raise ``OSError`` on failure.
    """

    def exists(self, path: Path) -> bool: ...
    def listdir(self, path: Path) -> list[str]: ...
    def stat(self, path: Path) -> EntryStat: ...  # follows symlinks
    def lstat(self, path: Path) -> EntryStat: ...  # does not follow symlinks
    def readlink(self, path: Path) -> str: ...
    def read_text(self, path: Path) -> str: ...
    def makedirs(self, path: Path) -> None: ...
    def symlink(self, target: Path | str, link_path: Path) -> None: ...
    def unlink(self, path: Path) -> None: ...
