"""Game state model."""

from collections import Counter

from pydantic import BaseModel, Field

from .card import DECK_SIZE, Card, Suit

NUM_FOUNDATIONS = len(Suit)
NUM_TABLEAU_COLUMNS = 7
INITIAL_SCORE = 1000


def _empty_piles(count: int) -> list[list[Card]]:
    return [[] for _ in range(count)]


class GameState(BaseModel):
    """Overall game state.

    The last element of every pile is its top card.
    """

    stock: list[Card] = Field(default_factory=list)
    waste: list[Card] = Field(default_factory=list)
    foundations: list[list[Card]] = Field(
        default_factory=lambda: _empty_piles(NUM_FOUNDATIONS)
    )
    tableau: list[list[Card]] = Field(
        default_factory=lambda: _empty_piles(NUM_TABLEAU_COLUMNS)
    )
    score: int = Field(default=INITIAL_SCORE, ge=0)

    def all_cards(self) -> list[Card]:
        """Get every card in the game, in no particular order."""
        cards = list(self.stock) + list(self.waste)
        for pile in self.foundations:
            cards.extend(pile)
        for column in self.tableau:
            cards.extend(column)
        return cards

    def foundation_count(self) -> int:
        """Get number of cards on all foundations."""
        return sum(len(pile) for pile in self.foundations)

    def waste_top(self) -> Card | None:
        """Get the top waste card if present."""
        return self.waste[-1] if self.waste else None

    def first_face_up(self, column: int) -> int | None:
        """Get the index of the first face-up card in a tableau column."""
        for i, card in enumerate(self.tableau[column]):
            if card.face_up:
                return i
        return None

    def is_consistent(self) -> bool:
        """Check the structural invariants of the layout.

        - all 52 cards present exactly once
        - face-up tableau cards form a suffix of their column
        - each foundation holds Ace..k of its own suit
        """
        counts = Counter(card.key for card in self.all_cards())
        if len(counts) != DECK_SIZE or any(n != 1 for n in counts.values()):
            return False

        for column in self.tableau:
            seen_face_up = False
            for card in column:
                if card.face_up:
                    seen_face_up = True
                elif seen_face_up:
                    return False

        for index, pile in enumerate(self.foundations):
            for position, card in enumerate(pile, 1):
                if card.suit != Suit(index) or card.rank != position:
                    return False

        return self.score >= 0

    def __str__(self) -> str:
        return (
            f"Stock {len(self.stock)}, Waste {len(self.waste)}, "
            f"Foundations {self.foundation_count()}/{DECK_SIZE}, Score {self.score}"
        )
