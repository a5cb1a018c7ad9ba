"""Outcome records for reconciliation, audit and a full sync."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .skill import SkillInfo

SyncStatus = Literal["synced", "claude-missing", "no-skills", "failed"]


@dataclass
class EntryFailure:
    """A single filesystem operation that failed and was skipped."""

    path: str
    operation: str  # "listdir", "lstat", "readlink", "symlink", "unlink", ...
    error: str


@dataclass
class ReconcileResult:
    """Counters from one reconciliation pass.

    Attributes:
        pending: Skills whose link could not be created; a later pass retries them.
        failures: Entries skipped because a filesystem call failed.
    """

    created: int = 0
    updated: int = 0
    cleaned: int = 0
    pending: dict[str, SkillInfo] = field(default_factory=dict)
    failures: list[EntryFailure] = field(default_factory=list)


@dataclass
class AuditResult:
    """Counters from one orphan audit.

    Attributes:
        removed: Symlinks unlinked because their plugin is not installed.
        kept: Symlinks attributed to an installed plugin.
        skipped: Entries that are not symlinks.
        aborted: True when nothing was inspected (unreadable directory or manifest).
    """

    removed: int = 0
    kept: int = 0
    skipped: int = 0
    aborted: bool = False
    failures: list[EntryFailure] = field(default_factory=list)


@dataclass
class SyncSummary:
    status: SyncStatus
    found: int = 0
    limit: int = 0
    reconcile: ReconcileResult | None = None
    audit: AuditResult | None = None
    error: str | None = None  # set when status is "failed"

    @property
    def failures(self) -> list[EntryFailure]:
        out: list[EntryFailure] = []
        if self.reconcile is not None:
            out.extend(self.reconcile.failures)
        if self.audit is not None:
            out.extend(self.audit.failures)
        return out
