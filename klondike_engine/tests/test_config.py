"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from klondike_engine.config import Config, load_config


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self):
        """Test default configuration."""
        config = load_config()
        assert config.game.initial_score == 1000
        assert config.game.move_penalty == 1
        assert config.game.seed is None
        assert config.rules.allow_foundation_moves
        assert config.logging.level == "INFO"
        assert not config.game_log.enabled

    def test_missing_file(self, tmp_path):
        """Test that a missing file yields defaults."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test that an empty file yields defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_load_yaml(self, tmp_path):
        """Test values read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  seed: 42\n"
            "  initial_score: 500\n"
            "rules:\n"
            "  allow_foundation_moves: false\n"
            "game_log:\n"
            "  enabled: true\n"
            "  output_path: logs/game.jsonl\n"
        )

        config = load_config(str(path))
        assert config.game.seed == 42
        assert config.game.initial_score == 500
        assert config.game.move_penalty == 1
        assert not config.rules.allow_foundation_moves
        assert config.game_log.enabled
        assert config.game_log.output_path == "logs/game.jsonl"

    def test_invalid_value(self, tmp_path):
        """Test that bad values are reported at load time."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  initial_score: -5\n")

        with pytest.raises(ValidationError):
            load_config(path)
