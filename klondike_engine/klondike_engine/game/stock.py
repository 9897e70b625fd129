"""Stock and waste cycle."""

from klondike_engine.models.game_state import GameState


def draw(state: GameState) -> bool:
    """Move the top stock card face up onto the waste.

    Returns:
        True if a card was drawn, False if the stock is empty.
    """
    if not state.stock:
        return False
    card = state.stock.pop()
    card.face_up = True
    state.waste.append(card)
    return True


def recycle(state: GameState) -> bool:
    """Turn the waste back over into an empty stock.

    The waste is reversed so that drawing again yields the cards in the
    order they were first drawn.

    Returns:
        True if the waste was recycled, False if not allowed
        (stock not empty or waste empty).
    """
    if state.stock or not state.waste:
        return False
    stock = list(reversed(state.waste))
    for card in stock:
        card.face_up = False
    state.stock = stock
    state.waste = []
    return True
