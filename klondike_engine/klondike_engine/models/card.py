"""Card model and deck helpers."""

import random
from enum import Enum, IntEnum

from pydantic import BaseModel, Field


class Suit(IntEnum):
    """Card suit (value is the index of the suit's foundation)."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3


class Rank(IntEnum):
    """Card rank, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Color(str, Enum):
    """Card color derived from suit."""

    RED = "red"
    BLACK = "black"


SUIT_COLORS = {
    Suit.HEARTS: Color.RED,
    Suit.DIAMONDS: Color.RED,
    Suit.CLUBS: Color.BLACK,
    Suit.SPADES: Color.BLACK,
}

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

RANK_NAMES = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

DECK_SIZE = len(Suit) * len(Rank)


class Card(BaseModel):
    """Single playing card.

    Suit and rank are the card's identity and cannot be reassigned;
    only ``face_up`` changes during play.
    """

    suit: Suit = Field(frozen=True)
    rank: Rank = Field(frozen=True)
    face_up: bool = False

    @property
    def color(self) -> Color:
        """Get the card color."""
        return SUIT_COLORS[self.suit]

    @property
    def key(self) -> tuple[Suit, Rank]:
        """Identity of the card, independent of face_up."""
        return (self.suit, self.rank)

    def is_opposite_color(self, other: "Card") -> bool:
        """Check if the other card has the opposite color."""
        return self.color != other.color

    def __str__(self) -> str:
        rank = RANK_NAMES.get(self.rank, str(int(self.rank)))
        return f"{SUIT_SYMBOLS[self.suit]}{rank}"

    def __repr__(self) -> str:
        state = "up" if self.face_up else "down"
        return f"Card({self}, {state})"


def build_deck() -> list[Card]:
    """Create the 52 cards in canonical order (suit-major, rank ascending).

    All cards are face down.
    """
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def shuffle(deck: list[Card], rng: random.Random | None = None) -> None:
    """Shuffle a deck in place (Fisher-Yates).

    Args:
        deck: Cards to shuffle.
        rng: Random source. Uses the module-level generator if not provided.
    """
    randint = rng.randint if rng is not None else random.randint
    for i in range(len(deck) - 1, 0, -1):
        j = randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]
