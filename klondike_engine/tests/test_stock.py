"""Tests for the stock/waste cycle."""

from klondike_engine.game.stock import draw, recycle
from klondike_engine.models.card import Card, Suit
from klondike_engine.models.game_state import GameState


def make_stock(*ranks: int) -> list[Card]:
    return [Card(suit=Suit.CLUBS, rank=r) for r in ranks]


class TestDraw:
    """Tests for draw function."""

    def test_draw_moves_top_card(self):
        """Test that the top stock card goes face up onto the waste."""
        state = GameState(stock=make_stock(1, 2, 3))

        assert draw(state)
        assert [c.rank for c in state.stock] == [1, 2]
        assert [c.rank for c in state.waste] == [3]
        assert state.waste[-1].face_up

    def test_draw_empty_stock(self):
        """Test that drawing from an empty stock is a no-op."""
        state = GameState(waste=make_stock(4))

        assert not draw(state)
        assert state.stock == []
        assert len(state.waste) == 1

    def test_draw_keeps_score(self):
        """Test that drawing does not cost points."""
        state = GameState(stock=make_stock(1), score=10)
        draw(state)
        assert state.score == 10


class TestRecycle:
    """Tests for recycle function."""

    def test_recycle_reverses_waste(self):
        """Test waste turned over into the stock, face down."""
        state = GameState(stock=make_stock(1, 2, 3))
        draw(state)
        draw(state)
        draw(state)
        assert [c.rank for c in state.waste] == [3, 2, 1]

        assert recycle(state)
        assert state.waste == []
        assert [c.rank for c in state.stock] == [1, 2, 3]
        assert not any(c.face_up for c in state.stock)

    def test_redraw_reproduces_order(self):
        """Test that drawing after a recycle repeats the first draw order."""
        state = GameState(stock=make_stock(5, 6, 7, 8))
        first = []
        while draw(state):
            first.append(state.waste[-1].rank)

        recycle(state)
        second = []
        while draw(state):
            second.append(state.waste[-1].rank)

        assert first == second == [8, 7, 6, 5]

    def test_recycle_with_stock_is_noop(self):
        """Test that recycling is refused while stock has cards."""
        state = GameState(stock=make_stock(1), waste=make_stock(2))

        assert not recycle(state)
        assert [c.rank for c in state.stock] == [1]
        assert [c.rank for c in state.waste] == [2]

    def test_recycle_empty_waste_is_noop(self):
        """Test that recycling nothing is a no-op."""
        state = GameState()
        assert not recycle(state)
        assert state.stock == []
