"""Symlink reconciliation for the skills target directory."""

from ._reconciler import reconcile_symlinks

__all__ = ["reconcile_symlinks"]
