"""Initial deal layout."""

from klondike_engine.models.card import Card
from klondike_engine.models.game_state import INITIAL_SCORE, NUM_TABLEAU_COLUMNS, GameState


def deal(deck: list[Card], initial_score: int = INITIAL_SCORE) -> GameState:
    """Deal a shuffled deck into a new game.

    Column j receives j + 1 cards popped from the end of the deck; the last
    card dealt into each column is turned face up. The remaining cards
    become the stock in their current order, face down.

    Args:
        deck: Shuffled deck. Consumed by the deal (left empty).
        initial_score: Starting score.

    Returns:
        New GameState.
    """
    state = GameState(score=initial_score)

    for j in range(NUM_TABLEAU_COLUMNS):
        for i in range(j + 1):
            card = deck.pop()
            card.face_up = i == j
            state.tableau[j].append(card)

    for card in deck:
        card.face_up = False
    state.stock = list(deck)
    deck.clear()

    return state
