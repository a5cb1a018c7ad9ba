"""Filesystem operations port and its adapters."""

from ._in_memory import InMemoryFilesystem
from ._local import LocalFilesystem
from ._protocols import EntryStat, FilesystemOps

__all__ = [
    "EntryStat",
    "FilesystemOps",
    "InMemoryFilesystem",
    "LocalFilesystem",
]
