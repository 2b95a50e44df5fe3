"""Tests for configuration loading."""

from pathlib import Path

import pytest

from taskboard_tui.config import (
    CONFIG_ENV_VAR,
    Config,
    SearchConfig,
    load_config,
    resolve_config_path,
)
from taskboard_tui.search import ScoringWeights


class TestLoadConfig:
    def test_test_config_values(self, test_config):
        assert test_config.board.path == Path("board")
        assert test_config.search.limit == 5
        assert test_config.search.debounce_ms == 0
        assert test_config.display.show_location is False
        assert test_config.display.show_priority is True

    def test_partial_scoring_override(self, test_config):
        """Unset scoring keys keep their defaults."""
        scoring = test_config.search.scoring
        assert scoring.exact == 2000
        assert scoring.gap == 3
        assert scoring.prefix == 500
        assert scoring.consecutive == 50

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.toml")
        assert config == Config()
        assert config.search.limit == 10
        assert config.search.scoring == ScoringWeights()

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "taskboard.toml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "taskboard.toml"
        path.write_text("[search\nlimit = ")
        with pytest.raises(ValueError, match="Invalid TOML"):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "taskboard.toml"
        path.write_text("[search]\nfuzziness = 3\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    def test_invalid_limit(self, tmp_path):
        path = tmp_path / "taskboard.toml"
        path.write_text("[search]\nlimit = 0\n")
        with pytest.raises(ValueError, match="Invalid search limit"):
            load_config(path)

    def test_section_must_be_table(self, tmp_path):
        path = tmp_path / "taskboard.toml"
        path.write_text('search = "fast"\n')
        with pytest.raises(ValueError, match="must be a table"):
            load_config(path)

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.toml"
        path.write_text("[search]\nlimit = 3\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config().search.limit == 3


class TestResolveConfigPath:
    def test_explicit_path_wins(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "/tmp/env.toml")
        assert resolve_config_path("x.toml") == Path("x.toml")

    def test_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert resolve_config_path() == Path("taskboard.toml")


class TestSearchConfig:
    def test_negative_debounce(self):
        with pytest.raises(ValueError, match="Invalid debounce_ms"):
            SearchConfig(debounce_ms=-1)

    def test_is_frozen(self):
        config = SearchConfig()
        with pytest.raises(AttributeError):
            config.limit = 3  # type: ignore[misc]
