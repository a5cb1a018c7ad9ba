"""In-memory filesystem for testing (no disk I/O)."""

from __future__ import annotations

import errno
import os
import posixpath
from typing import TYPE_CHECKING

from ._protocols import EntryStat

if TYPE_CHECKING:
    from pathlib import Path

_MAX_LINK_HOPS = 40


def _key(path: Path | str) -> str:
    return posixpath.normpath(os.fspath(path))


def _enoent(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


class InMemoryFilesystem:
    """Simulated POSIX tree of directories, files and symlinks.

    Symlinks are followed component by component, relative link targets are
    resolved against the link's own directory. ``fail()`` makes one operation on
    one path raise, which is how tests exercise per-entry error handling.

        fs = InMemoryFilesystem()
        fs.add_skill("/cache/mkt/plugin/1.0.0/skills/review")
        fs.add_link("/skills/review", "/cache/mkt/plugin/1.0.0/skills/review")
        fs.fail("readlink", "/skills/review")
    """

    def __init__(self) -> None:
        self._dirs: set[str] = {"/"}
        self._files: dict[str, str] = {}
        self._links: dict[str, str] = {}
        self._failures: dict[tuple[str, str], OSError] = {}

    # --- setup helpers ---

    def add_dir(self, path: Path | str) -> None:
        key = _key(path)
        while key not in self._dirs:
            self._dirs.add(key)
            key = posixpath.dirname(key)

    def add_file(self, path: Path | str, content: str = "") -> None:
        key = _key(path)
        self.add_dir(posixpath.dirname(key))
        self._files[key] = content

    def add_link(self, path: Path | str, target: Path | str) -> None:
        key = _key(path)
        self.add_dir(posixpath.dirname(key))
        self._links[key] = os.fspath(target)

    def add_skill(self, path: Path | str) -> None:
        """A skill directory with its SKILL.md marker."""
        self.add_file(posixpath.join(_key(path), "SKILL.md"))

    def fail(self, operation: str, path: Path | str, error: OSError | None = None) -> None:
        key = _key(path)
        self._failures[(operation, key)] = error or PermissionError(
            errno.EACCES, os.strerror(errno.EACCES), key
        )

    # --- inspection helpers ---

    @property
    def links(self) -> dict[str, str]:
        return dict(self._links)

    def is_link(self, path: Path | str) -> bool:
        return _key(path) in self._links

    def is_dir(self, path: Path | str) -> bool:
        return _key(path) in self._dirs

    def is_file(self, path: Path | str) -> bool:
        return _key(path) in self._files

    # --- FilesystemOps ---

    def exists(self, path: Path) -> bool:
        try:
            self._check("exists", path)
            resolved = self._resolve(_key(path))
        except OSError:
            return False
        return resolved in self._dirs or resolved in self._files

    def listdir(self, path: Path) -> list[str]:
        self._check("listdir", path)
        resolved = self._resolve(_key(path))
        if resolved in self._files:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), os.fspath(path))
        if resolved not in self._dirs:
            raise _enoent(os.fspath(path))
        names = {
            posixpath.basename(entry)
            for entry in (*self._dirs, *self._files, *self._links)
            if entry != resolved and posixpath.dirname(entry) == resolved
        }
        return sorted(names)

    def stat(self, path: Path) -> EntryStat:
        self._check("stat", path)
        resolved = self._resolve(_key(path))
        if resolved in self._dirs:
            return EntryStat(is_dir=True)
        if resolved in self._files:
            return EntryStat(is_dir=False)
        raise _enoent(os.fspath(path))

    def lstat(self, path: Path) -> EntryStat:
        self._check("lstat", path)
        loc = self._locate(path)
        if loc in self._links:
            return EntryStat(is_dir=False, is_symlink=True)
        if loc in self._dirs:
            return EntryStat(is_dir=True)
        if loc in self._files:
            return EntryStat(is_dir=False)
        raise _enoent(os.fspath(path))

    def readlink(self, path: Path) -> str:
        self._check("readlink", path)
        loc = self._locate(path)
        if loc in self._links:
            return self._links[loc]
        if loc in self._dirs or loc in self._files:
            raise OSError(errno.EINVAL, os.strerror(errno.EINVAL), os.fspath(path))
        raise _enoent(os.fspath(path))

    def read_text(self, path: Path) -> str:
        self._check("read_text", path)
        resolved = self._resolve(_key(path))
        if resolved in self._dirs:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), os.fspath(path))
        if resolved not in self._files:
            raise _enoent(os.fspath(path))
        return self._files[resolved]

    def makedirs(self, path: Path) -> None:
        self._check("makedirs", path)
        resolved = self._resolve(_key(path))
        if resolved in self._files:
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), os.fspath(path))
        self.add_dir(resolved)

    def symlink(self, target: Path | str, link_path: Path) -> None:
        self._check("symlink", link_path)
        loc = self._locate(link_path)
        if posixpath.dirname(loc) not in self._dirs:
            raise _enoent(os.fspath(link_path))
        if loc in self._links or loc in self._dirs or loc in self._files:
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), os.fspath(link_path))
        self._links[loc] = os.fspath(target)

    def unlink(self, path: Path) -> None:
        self._check("unlink", path)
        loc = self._locate(path)
        if loc in self._links:
            del self._links[loc]
        elif loc in self._files:
            del self._files[loc]
        elif loc in self._dirs:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), os.fspath(path))
        else:
            raise _enoent(os.fspath(path))

    # --- internals ---

    def _check(self, operation: str, path: Path | str) -> None:
        error = self._failures.get((operation, _key(path)))
        if error is not None:
            raise error

    def _locate(self, path: Path | str) -> str:
        """Resolve every component but the last."""
        key = _key(path)
        parent, name = posixpath.split(key)
        if not name:
            return key
        return posixpath.join(self._resolve(parent), name)

    def _resolve(self, key: str, depth: int = 0) -> str:
        if depth > _MAX_LINK_HOPS:
            raise OSError(errno.ELOOP, os.strerror(errno.ELOOP), key)
        current = "/" if key.startswith("/") else ""
        for part in key.split("/"):
            if not part or part == ".":
                continue
            candidate = posixpath.join(current, part) if current else part
            if candidate in self._links:
                target = self._links[candidate]
                if not posixpath.isabs(target):
                    target = posixpath.join(posixpath.dirname(candidate), target)
                candidate = self._resolve(_key(target), depth + 1)
            current = candidate
        return current or "."
