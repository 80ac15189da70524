"""Tests for the YAML config loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from ghwatch.core.config_loader import ConfigLoadError, load_watch_config


class TestLoadWatchConfig:
    def test_loads_valid_file(self, config_file: Path):
        config = load_watch_config(config_file)
        assert config.pat == "ghp_test"
        assert [r.slug for r in config.repos] == ["octo/hello", "octo/world"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigLoadError, match="Error reading"):
            load_watch_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("pat: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Error parsing"):
            load_watch_config(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="mapping"):
            load_watch_config(path)

    def test_repo_missing_owner(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("pat: x\nrepos:\n  - name: hello\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            load_watch_config(path)

    def test_empty_file_gives_empty_config(self, tmp_path: Path):
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")
        config = load_watch_config(path)
        assert config.pat == ""
        assert config.repos == []
