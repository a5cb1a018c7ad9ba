"""Skill discovery: find the skills to expose from the plugin cache and marketplaces."""

from ._discoverer import SKILL_MARKER, discover_skills, find_in_cache, find_in_marketplaces

__all__ = [
    "SKILL_MARKER",
    "discover_skills",
    "find_in_cache",
    "find_in_marketplaces",
]
