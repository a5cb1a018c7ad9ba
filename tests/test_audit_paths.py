"""Tests for attributing symlink targets to plugins."""

import pytest

from claude_skill_sync.audit import (
    PATH_MATCHERS,
    PluginRef,
    extract_plugin_name_from_path,
    extract_plugin_ref,
    match_cache_path,
    match_marketplace_plugin_path,
    match_marketplace_skill_path,
)
from claude_skill_sync.audit._paths import split_segments


def test_cache_path():
    path = "/cache/claude-plugins-official/backend-development/e30768372b41/skills/python-tdd"
    assert extract_plugin_name_from_path(path) == "backend-development@claude-plugins-official"


def test_cache_path_simple():
    assert extract_plugin_name_from_path("/cache/mp1/plug1/1.0.0/skills/x") == "plug1@mp1"


def test_marketplace_plugins_path():
    path = "/marketplaces/claude-code-workflows/plugins/rust-systems/skills/rust-systems"
    assert extract_plugin_name_from_path(path) == "rust-systems@claude-code-workflows"
    assert extract_plugin_name_from_path("/marketplaces/mp/plugins/p/skills/x") == "p@mp"


def test_marketplace_plugins_path_plugin_root():
    assert extract_plugin_name_from_path("/marketplaces/mp/plugins/p") == "p@mp"


def test_marketplace_direct_skills_path():
    path = "/marketplaces/custom-marketplace/skills/global-skill"
    assert extract_plugin_name_from_path(path) == "custom-marketplace@custom-marketplace"
    assert extract_plugin_name_from_path("/marketplaces/mp/skills/x") == "mp@mp"


def test_unrecognized_path():
    assert extract_plugin_name_from_path("/some/random/path/that/doesnt/match/pattern") is None
    assert extract_plugin_name_from_path("") is None


def test_relative_path():
    assert extract_plugin_name_from_path("cache/marketplace/plugin/version/skills/skill") == (
        "plugin@marketplace"
    )


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/cache/marketplace/plugin/version/skills/skill/", "plugin@marketplace"),
        ("/marketplaces/some-marketplace/plugins/my-plugin/skills/skill/", "my-plugin@some-marketplace"),
        ("/marketplaces/mp/plugins/p///", "p@mp"),
    ],
)
def test_trailing_slashes(path, expected):
    assert extract_plugin_name_from_path(path) == expected


def test_empty_plugin_segment():
    assert extract_plugin_name_from_path("/cache/marketplace//version/skills/skill") is None


def test_empty_marketplace_segment():
    assert extract_plugin_name_from_path("/marketplaces//plugins/p/skills/x") is None
    assert extract_plugin_name_from_path("/marketplaces//skills/x") is None


def test_windows_separators():
    path = "C:\\Users\\me\\.claude\\plugins\\cache\\mp\\plug\\1.0.0\\skills\\x"
    assert extract_plugin_name_from_path(path) == "plug@mp"


def test_segment_boundaries_required():
    assert extract_plugin_name_from_path("/mycache/mp/p/1.0.0/skills/x") is None
    assert extract_plugin_name_from_path("/old-marketplaces/mp/skills/x") is None


def test_cache_requires_something_after_skills():
    # "skills" must be followed by a skill segment
    assert extract_plugin_name_from_path("/cache/mp/p/1.0.0/skills") is None


def test_direct_skills_requires_skill_segment():
    assert extract_plugin_name_from_path("/marketplaces/mp/skills") is None


def test_cache_layout_wins_over_marketplace_layout():
    path = "/marketplaces/mp/plugins/p/cache/cmp/cp/1.0.0/skills/x"
    assert extract_plugin_ref(path) == PluginRef(plugin="cp", marketplace="cmp")


def test_later_cache_occurrence_used_when_first_is_malformed():
    path = "/cache/mp//1.0.0/cache/mp2/p2/2.0.0/skills/x"
    assert extract_plugin_name_from_path(path) == "p2@mp2"


def test_matchers_in_priority_order():
    assert PATH_MATCHERS == (
        match_cache_path,
        match_marketplace_plugin_path,
        match_marketplace_skill_path,
    )


def test_individual_matchers():
    segments = split_segments("/marketplaces/mp/plugins/p/skills/x")
    assert match_cache_path(segments) is None
    assert match_marketplace_plugin_path(segments) == PluginRef(plugin="p", marketplace="mp")
    assert match_marketplace_skill_path(segments) is None

    flat = split_segments("/marketplaces/mp/skills/x")
    assert match_marketplace_plugin_path(flat) is None
    assert match_marketplace_skill_path(flat) == PluginRef(plugin="mp", marketplace="mp")


def test_plugin_ref_key():
    assert PluginRef(plugin="p", marketplace="m").key == "p@m"
