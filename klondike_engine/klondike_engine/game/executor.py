"""Applies validated moves to the game state."""

from klondike_engine.models.card import Card
from klondike_engine.models.game_state import GameState
from klondike_engine.models.move import (
    FoundationSource,
    MoveSource,
    MoveTarget,
    TableauSource,
    TableauTarget,
    WasteSource,
)

from .validator import ValidationResult


def apply_move(
    state: GameState,
    source: MoveSource,
    target: MoveTarget,
    result: ValidationResult,
    penalty: int = 1,
) -> list[Card]:
    """Relocate the cards of a valid move and update the score.

    The caller must pass the result of validating exactly this move
    against this state.

    Args:
        state: Game state to mutate
        source: Validated move source
        target: Validated move target
        result: Valid ValidationResult for the move
        penalty: Points subtracted for the move (score floors at 0)

    Returns:
        The cards that moved.
    """
    if not result.is_valid:
        raise ValueError("Cannot apply an invalid move")

    cards = list(result.cards)

    if isinstance(source, WasteSource):
        state.waste.pop()
    elif isinstance(source, TableauSource):
        column = state.tableau[source.column]
        del column[source.start_index:]
        # Reveal the newly exposed card
        if column and not column[-1].face_up:
            column[-1].face_up = True
    elif isinstance(source, FoundationSource):
        state.foundations[source.index].pop()

    if isinstance(target, TableauTarget):
        state.tableau[target.column].extend(cards)
    else:
        state.foundations[result.foundation_index].extend(cards)

    state.score = max(0, state.score - penalty)
    return cards
