"""State file model for installed_plugins.json."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class InstalledPluginsManifest(BaseModel):
    """Root of installed_plugins.json. Only the keys of ``plugins`` are used."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    version: Any = None
    plugins: dict[str, Any]  # "name@marketplace" -> install record

    @field_validator("plugins", mode="before")
    @classmethod
    def _plugins_must_be_object(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            raise ValueError("plugins must be a JSON object")
        return v
