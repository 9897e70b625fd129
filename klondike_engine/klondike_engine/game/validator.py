"""Move validation for requested card moves."""

from dataclasses import dataclass, field

from klondike_engine.models.card import Card, Rank, Suit
from klondike_engine.models.game_state import GameState
from klondike_engine.models.move import (
    FoundationSource,
    FoundationTarget,
    MoveSource,
    MoveTarget,
    TableauSource,
    TableauTarget,
    WasteSource,
)

# Foundation pile for each suit, in the layout's left-to-right order
FOUNDATION_INDEX: dict[Suit, int] = {
    Suit.HEARTS: 0,
    Suit.DIAMONDS: 1,
    Suit.CLUBS: 2,
    Suit.SPADES: 3,
}


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""
    foundation_index: int | None = None  # Resolved pile for foundation moves
    cards: list[Card] = field(default_factory=list)  # Cards that would move


def _reject(message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, error_message=message)


class MoveValidator:
    """Validates requested moves against the current state.

    Validation never mutates the state or the request.
    """

    def __init__(self, allow_foundation_moves: bool = True):
        """Initialize validator.

        Args:
            allow_foundation_moves: If False, foundation cards are immovable.
        """
        self.allow_foundation_moves = allow_foundation_moves

    def validate(
        self,
        source: MoveSource,
        target: MoveTarget,
        state: GameState,
    ) -> ValidationResult:
        """Validate a move request.

        Args:
            source: Where the cards come from
            target: Where the cards go
            state: Current game state

        Returns:
            ValidationResult. For valid foundation moves, foundation_index
            holds the pile derived from the card's suit.
        """
        cards, error = self._cards_to_move(source, state)
        if error:
            return _reject(error)

        if isinstance(target, TableauTarget):
            return self._validate_tableau_target(source, target, cards, state)
        if isinstance(target, FoundationTarget):
            return self._validate_foundation_target(source, cards, state)
        return _reject(f"Unknown move target: {target!r}")

    def _cards_to_move(
        self,
        source: MoveSource,
        state: GameState,
    ) -> tuple[list[Card], str]:
        """Collect the moving cards for a source.

        Returns:
            (cards, error message); the message is empty on success.
        """
        if isinstance(source, WasteSource):
            if not state.waste:
                return [], "Waste is empty"
            return [state.waste[-1]], ""

        if isinstance(source, TableauSource):
            if not 0 <= source.column < len(state.tableau):
                return [], f"No tableau column {source.column}"
            column = state.tableau[source.column]
            if not 0 <= source.start_index < len(column):
                return [], f"No card at index {source.start_index} in column {source.column}"
            if not column[source.start_index].face_up:
                return [], "Cannot move a face-down card"
            return column[source.start_index:], ""

        if isinstance(source, FoundationSource):
            if not self.allow_foundation_moves:
                return [], "Foundation cards cannot be moved"
            if not 0 <= source.index < len(state.foundations):
                return [], f"No foundation {source.index}"
            pile = state.foundations[source.index]
            if not pile:
                return [], f"Foundation {source.index} is empty"
            return [pile[-1]], ""

        return [], f"Unknown move source: {source!r}"

    def _validate_tableau_target(
        self,
        source: MoveSource,
        target: TableauTarget,
        cards: list[Card],
        state: GameState,
    ) -> ValidationResult:
        """Check the alternating-color, descending-by-one rule."""
        if not 0 <= target.column < len(state.tableau):
            return _reject(f"No tableau column {target.column}")
        if isinstance(source, TableauSource) and source.column == target.column:
            return _reject("Source and destination are the same column")

        moving = cards[0]
        column = state.tableau[target.column]

        if not column:
            if moving.rank != Rank.KING:
                return _reject("Only a King can be moved to an empty column")
            return ValidationResult(is_valid=True, cards=cards)

        top = column[-1]
        if not moving.is_opposite_color(top):
            return _reject(f"{moving} is the same color as {top}")
        if moving.rank != top.rank - 1:
            return _reject(f"{moving} is not one rank below {top}")

        return ValidationResult(is_valid=True, cards=cards)

    def _validate_foundation_target(
        self,
        source: MoveSource,
        cards: list[Card],
        state: GameState,
    ) -> ValidationResult:
        """Check the ascending same-suit rule on the suit's own foundation."""
        if len(cards) != 1:
            return _reject("Only one card can be moved to a foundation")

        card = cards[0]
        index = FOUNDATION_INDEX[card.suit]
        if isinstance(source, FoundationSource) and source.index == index:
            return _reject("Card is already on its foundation")

        pile = state.foundations[index]
        if not pile:
            if card.rank != Rank.ACE:
                return _reject("Only an Ace can start a foundation")
        elif card.rank != pile[-1].rank + 1:
            return _reject(f"{card} does not follow {pile[-1]}")

        return ValidationResult(is_valid=True, foundation_index=index, cards=cards)
