"""Game engine for Klondike solitaire."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable

from klondike_engine.config import Config
from klondike_engine.logging import GameLogger, format_cards
from klondike_engine.models.card import DECK_SIZE, build_deck, shuffle
from klondike_engine.models.game_state import GameState
from klondike_engine.models.move import TableauTarget, parse_source, parse_target

from . import stock
from .deal import deal
from .executor import apply_move
from .validator import MoveValidator

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Outcome of a move attempt."""

    applied: bool
    state: GameState
    reason: str = ""  # Why the move was rejected


def check_win(state: GameState) -> bool:
    """Check if every card has reached the foundations."""
    return state.foundation_count() == DECK_SIZE


class GameEngine:
    """Owns one game and applies the player's intents to it.

    Every public operation returns a copy of the resulting state, so
    callers can render it without being able to modify the game.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
        state: GameState | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for shuffling (seeded from config if not provided)
            state: Existing state to adopt instead of dealing a new game
        """
        self.config = config or Config()
        self.rules = self.config.rules
        self.game_logger = game_logger

        seed = self.config.game.seed
        if rng is None and seed is not None:
            rng = random.Random(seed)
        self.rng = rng

        self.validator = MoveValidator(
            allow_foundation_moves=self.rules.allow_foundation_moves,
        )

        self._on_move: Callable[[str], None] | None = None
        self._on_win: Callable[[int], None] | None = None
        self._won = False

        if state is None:
            self.new_game()
        else:
            self.state = state
            self._won = check_win(state)

    def set_callbacks(
        self,
        on_move: Callable[[str], None] | None = None,
        on_win: Callable[[int], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_move: Called after each applied move (description)
            on_win: Called once when the game is won (final score)

        Exceptions raised by a callback are logged and do not affect the move.
        """
        self._on_move = on_move
        self._on_win = on_win

    def new_game(self) -> GameState:
        """Build, shuffle and deal a new game.

        Returns:
            Initial state
        """
        deck = build_deck()
        shuffle(deck, self.rng)
        self.state = deal(deck, self.config.game.initial_score)
        self._won = False

        logger.info("New game dealt (stock %d)", len(self.state.stock))
        if self.game_logger:
            self.game_logger.log_game_start(self.state, self.config.game.seed)

        return self.get_state()

    def get_state(self) -> GameState:
        """Get a copy of the current state."""
        return self.state.model_copy(deep=True)

    def draw(self) -> GameState:
        """Draw one card from stock to waste (no-op if stock is empty)."""
        if stock.draw(self.state):
            card = self.state.waste_top()
            logger.debug("Drew %s", card)
            if self.game_logger:
                self.game_logger.log_draw(card)
        return self.get_state()

    def recycle_stock_from_waste(self) -> GameState:
        """Turn the waste over into the stock (no-op unless stock is empty)."""
        if stock.recycle(self.state):
            logger.debug("Recycled %d cards to stock", len(self.state.stock))
            if self.game_logger:
                self.game_logger.log_recycle(len(self.state.stock))
        return self.get_state()

    def attempt_move(self, source: Any, target: Any) -> MoveResult:
        """Validate and apply a move.

        Invalid or malformed requests leave the state untouched.

        Args:
            source: MoveSource model or equivalent mapping
            target: MoveTarget model or equivalent mapping

        Returns:
            MoveResult with applied flag and current state
        """
        move_source = parse_source(source)
        move_target = parse_target(target)
        if move_source is None or move_target is None:
            logger.debug("Rejected malformed move: %r -> %r", source, target)
            return MoveResult(
                applied=False,
                state=self.get_state(),
                reason="Malformed move request",
            )

        validation = self.validator.validate(move_source, move_target, self.state)
        if not validation.is_valid:
            logger.debug(
                "Rejected %s -> %s: %s",
                move_source,
                move_target,
                validation.error_message,
            )
            return MoveResult(
                applied=False,
                state=self.get_state(),
                reason=validation.error_message,
            )

        cards = apply_move(
            self.state,
            move_source,
            move_target,
            validation,
            penalty=self.config.game.move_penalty,
        )

        if isinstance(move_target, TableauTarget):
            destination = str(move_target)
        else:
            destination = f"foundation[{validation.foundation_index}]"
        description = f"{format_cards(cards)}: {move_source} -> {destination}"
        logger.debug("Moved %s (score %d)", description, self.state.score)

        if self.game_logger:
            self.game_logger.log_move(
                str(move_source), destination, cards, self.state.score
            )
        if self._on_move:
            self._notify(self._on_move, description)

        self._check_win()
        return MoveResult(applied=True, state=self.get_state())

    def is_won(self, state: GameState | None = None) -> bool:
        """Check if the given state (or the current game) is won."""
        return check_win(state if state is not None else self.state)

    def _check_win(self) -> None:
        """Report the win the first time the game reaches it."""
        if self._won or not check_win(self.state):
            return
        self._won = True

        logger.info("Game won with score %d", self.state.score)
        if self.game_logger:
            self.game_logger.log_game_won(self.state.score)
        if self._on_win:
            self._notify(self._on_win, self.state.score)

    def _notify(self, callback: Callable[[Any], None], value: Any) -> None:
        """Run a presentation callback; its errors never undo or abort a move."""
        try:
            callback(value)
        except Exception as e:
            logger.exception(f"Callback error: {e}")
