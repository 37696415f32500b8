"""Tests for config discovery and loading."""

from pathlib import Path

import pytest

from dtutil.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, read_toml
from dtutil.errors import ConfigError


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[calendar]\nweek_start = "sunday"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadToml:
    def test_parses_sections(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[calendar]\nweek_start = "saturday"\n[logging]\nverbose = true\n')
        data = read_toml(config_file)
        assert data == {"calendar": {"week_start": "saturday"}, "logging": {"verbose": True}}

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert read_toml(config_file) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[calendar\nweek_start = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            read_toml(config_file)
