"""Game logger for step-by-step replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from klondike_engine.models.card import Card
from klondike_engine.models.game_state import GameState

from .formatters import format_card, format_cards, format_state


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    Together with the initial layout in ``game_start`` this allows the
    game to be replayed move by move.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None
        self._game = 0

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, state: GameState, seed: int | None = None) -> None:
        """Log the initial deal.

        Args:
            state: State right after the deal.
            seed: Seed used for the shuffle, if any.
        """
        self._game += 1
        self._write({
            "type": "game_start",
            "game": self._game,
            "timestamp": datetime.now().isoformat(),
            "seed": seed,
            "layout": format_state(state),
        })

    def log_draw(self, card: Card) -> None:
        """Log a card drawn from stock to waste."""
        self._write({
            "type": "draw",
            "game": self._game,
            "card": format_card(card),
        })

    def log_recycle(self, count: int) -> None:
        """Log the waste being turned back into the stock.

        Args:
            count: Number of cards moved to the stock.
        """
        self._write({
            "type": "recycle",
            "game": self._game,
            "count": count,
        })

    def log_move(
        self,
        source: str,
        target: str,
        cards: list[Card],
        score: int,
    ) -> None:
        """Log an applied move.

        Args:
            source: Source pile description.
            target: Destination pile description (resolved).
            cards: Cards that moved.
            score: Score after the move.
        """
        self._write({
            "type": "move",
            "game": self._game,
            "from": source,
            "to": target,
            "cards": format_cards(cards),
            "score": score,
        })

    def log_game_won(self, score: int) -> None:
        """Log the end of a won game."""
        self._write({
            "type": "game_won",
            "game": self._game,
            "timestamp": datetime.now().isoformat(),
            "score": score,
        })
