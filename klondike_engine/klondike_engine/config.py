"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from klondike_engine.logging import GameLogConfig
from klondike_engine.models.game_state import INITIAL_SCORE


class GameConfig(BaseModel):
    """Game configuration."""

    initial_score: int = Field(default=INITIAL_SCORE, ge=0)
    move_penalty: int = Field(default=1, ge=0)
    seed: int | None = None  # Fixed seed for reproducible deals


class RulesConfig(BaseModel):
    """Rules configuration."""

    allow_foundation_moves: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hidden: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    rules: RulesConfig = RulesConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
