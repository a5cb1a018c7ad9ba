from .config import MAX_SKILLS, SyncConfig
from .results import AuditResult, EntryFailure, ReconcileResult, SyncStatus, SyncSummary
from .skill import SkillInfo, SkillSource
from .state import InstalledPluginsManifest

__all__ = [
    "MAX_SKILLS",
    "AuditResult",
    "EntryFailure",
    "InstalledPluginsManifest",
    "ReconcileResult",
    "SkillInfo",
    "SkillSource",
    "SyncConfig",
    "SyncStatus",
    "SyncSummary",
]
