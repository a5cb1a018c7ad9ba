from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path

SkillSource = Literal["cache", "marketplaces"]


@dataclass(frozen=True)
class SkillInfo:
    """A skill directory found during one discovery pass.

    Attributes:
        name: Directory name under skills/; also the link name in the target directory.
        path: Skill directory (the one holding SKILL.md).
        version: Plugin version directory for cache skills, "latest" for marketplace skills.
        source: Which tree the skill was found in.
    """

    name: str
    path: Path
    version: str
    source: SkillSource
