"""Formatters for game log output."""

from klondike_engine.models.card import Card, Rank, Suit
from klondike_engine.models.game_state import GameState

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}

RANK_CODES: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "AH" for Ace of hearts, "#10S" for a
        face-down ten of spades).
    """
    code = f"{RANK_CODES[card.rank]}{SUIT_CODES[card.suit]}"
    return code if card.face_up else f"#{code}"


def format_cards(cards: list[Card]) -> str:
    """Format a pile to comma-separated string, bottom card first.

    Returns:
        Comma-separated card strings (e.g., "#KC,QH").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_state(state: GameState) -> dict[str, object]:
    """Format the full layout to a JSON-ready dict."""
    return {
        "stock": format_cards(state.stock),
        "waste": format_cards(state.waste),
        "foundations": [format_cards(p) for p in state.foundations],
        "tableau": [format_cards(c) for c in state.tableau],
        "score": state.score,
    }
