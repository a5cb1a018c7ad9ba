from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..errors import LoadError
from ..models.config import SyncConfig


def load_config(path: Path, home: Path | None = None) -> SyncConfig:
    """Load a sync config from a JSON file.

    Keys may be snake_case or camelCase. Any path left out falls back to the
    default layout under ``home`` (see SyncConfig.from_home).
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise LoadError(f"Config file not found: {path}", path=path) from e
    except OSError as e:
        raise LoadError(f"Cannot read config file {path}: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {path}: {e}", path=path) from e
    if not isinstance(data, dict):
        raise LoadError(f"Config root must be an object: {path}", path=path)

    merged = SyncConfig.from_home(home).model_dump(by_alias=True)
    merged.update(_by_alias(data))
    try:
        return SyncConfig.model_validate(merged)
    except ValidationError as e:
        raise LoadError(f"Invalid config in {path}: {e}", path=path) from e


def _by_alias(data: dict[str, Any]) -> dict[str, Any]:
    aliases = {name: f.alias for name, f in SyncConfig.model_fields.items() if f.alias}
    return {aliases.get(k, k): v for k, v in data.items()}
