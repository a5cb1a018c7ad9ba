"""Tests for reading installed_plugins.json."""

import json

import pytest

from claude_skill_sync import InMemoryFilesystem
from claude_skill_sync.audit import (
    InstalledPlugins,
    ManifestUnreadable,
    load_installed_plugins,
    read_installed_plugins,
)


def test_valid_manifest():
    content = json.dumps(
        {
            "version": 2,
            "plugins": {
                "plugin1@marketplace1": [{"scope": "user", "version": "1.0.0"}],
                "plugin2@marketplace2": [{"scope": "user"}],
            },
        }
    )
    result = read_installed_plugins(content)
    assert isinstance(result, InstalledPlugins)
    assert result.keys == frozenset({"plugin1@marketplace1", "plugin2@marketplace2"})
    assert "plugin1@marketplace1" in result
    assert len(result) == 2


def test_empty_plugins_object_is_readable_and_empty():
    result = read_installed_plugins(json.dumps({"version": 2, "plugins": {}}))
    assert result == InstalledPlugins(keys=frozenset())


def test_malformed_json():
    assert isinstance(read_installed_plugins("{ invalid json"), ManifestUnreadable)


def test_plugins_key_missing():
    assert isinstance(read_installed_plugins(json.dumps({"version": 2})), ManifestUnreadable)


@pytest.mark.parametrize("plugins", ["not-an-object", 42, None, True, [], ["a@b"]])
def test_plugins_not_an_object(plugins):
    content = json.dumps({"version": 2, "plugins": plugins})
    assert isinstance(read_installed_plugins(content), ManifestUnreadable)


@pytest.mark.parametrize("content", ["[]", "null", "42", '"text"'])
def test_root_not_an_object(content):
    assert isinstance(read_installed_plugins(content), ManifestUnreadable)


def test_additional_properties_ignored():
    content = json.dumps(
        {
            "version": 2,
            "lastUpdated": "2026-01-01T00:00:00Z",
            "plugins": {"plugin1@marketplace1": {"installPath": "/x", "extra": {"nested": True}}},
        }
    )
    result = read_installed_plugins(content)
    assert isinstance(result, InstalledPlugins)
    assert result.keys == {"plugin1@marketplace1"}


def test_large_number_of_plugins():
    plugins = {f"plugin{i}@marketplace{i % 10}": [] for i in range(1000)}
    result = read_installed_plugins(json.dumps({"version": 2, "plugins": plugins}))
    assert isinstance(result, InstalledPlugins)
    assert len(result) == 1000


def test_version_is_not_validated():
    result = read_installed_plugins(json.dumps({"plugins": {"a@b": {}}}))
    assert result == InstalledPlugins(keys=frozenset({"a@b"}))


def test_load_from_file(tmp_path):
    path = tmp_path / "installed_plugins.json"
    path.write_text(json.dumps({"version": 2, "plugins": {"a@b": {}}}))
    assert load_installed_plugins(path) == InstalledPlugins(keys=frozenset({"a@b"}))


def test_load_missing_file_is_unreadable(tmp_path):
    result = load_installed_plugins(tmp_path / "missing.json")
    assert isinstance(result, ManifestUnreadable)
    assert "missing.json" in result.reason


def test_load_invalid_file_is_unreadable(tmp_path):
    path = tmp_path / "installed_plugins.json"
    path.write_text('{"plugins": []}')
    assert isinstance(load_installed_plugins(path), ManifestUnreadable)


def test_load_reads_through_filesystem():
    fs = InMemoryFilesystem()
    fs.add_file("/claude/plugins/installed_plugins.json", json.dumps({"plugins": {"a@b": {}}}))
    result = load_installed_plugins("/claude/plugins/installed_plugins.json", fs)
    assert result == InstalledPlugins(keys=frozenset({"a@b"}))


def test_load_failing_read_is_unreadable():
    fs = InMemoryFilesystem()
    fs.add_file("/installed_plugins.json", json.dumps({"plugins": {}}))
    fs.fail("read_text", "/installed_plugins.json")
    result = load_installed_plugins("/installed_plugins.json", fs)
    assert isinstance(result, ManifestUnreadable)
    assert "Permission denied" in result.reason
