"""Sync configuration: where to look for skills and where to link them."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_SKILLS = 100


class SyncConfig(BaseModel):
    """Directory roots and limits for one sync.

    Build the default layout with ``SyncConfig.from_home()`` or load a JSON file
    with ``loaders.load_config``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    claude_dir: Path = Field(alias="claudeDir")
    cache_dir: Path = Field(alias="cacheDir")
    marketplaces_dir: Path = Field(alias="marketplacesDir")
    target_dir: Path = Field(alias="targetDir")
    # None disables the orphan audit regardless of prune_orphans
    installed_plugins_file: Path | None = Field(None, alias="installedPluginsFile")
    max_skills: int = Field(MAX_SKILLS, alias="maxSkills", gt=0)
    prune_orphans: bool = Field(False, alias="pruneOrphans")

    @field_validator(
        "claude_dir", "cache_dir", "marketplaces_dir", "target_dir", "installed_plugins_file"
    )
    @classmethod
    def _absolute(cls, v: Path | None) -> Path | None:
        # skill paths under these roots become link targets, so they must be absolute
        return v.expanduser().absolute() if v is not None else None

    @classmethod
    def from_home(cls, home: Path | None = None, **overrides: object) -> SyncConfig:
        """Default layout rooted at a home directory.

        home: defaults to Path.home()
        overrides: any field by name, e.g. ``max_skills=20``
        """
        home = Path(home) if home is not None else Path.home()
        claude_dir = home / ".claude"
        plugins_dir = claude_dir / "plugins"
        fields: dict[str, object] = {
            "claude_dir": claude_dir,
            "cache_dir": plugins_dir / "cache",
            "marketplaces_dir": plugins_dir / "marketplaces",
            "target_dir": home / ".config" / "opencode" / "skill",
            "installed_plugins_file": plugins_dir / "installed_plugins.json",
        }
        fields.update(overrides)
        return cls.model_validate(fields)
