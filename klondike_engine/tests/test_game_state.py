"""Tests for game state model."""

import pytest

from klondike_engine.game.deal import deal
from klondike_engine.models.card import Card, Rank, Suit, build_deck


@pytest.fixture
def state():
    return deal(build_deck())


class TestGameState:
    """Tests for GameState class."""

    def test_all_cards(self, state):
        """Test collecting every card."""
        assert len(state.all_cards()) == 52

    def test_first_face_up(self, state):
        """Test locating the start of the face-up run."""
        assert state.first_face_up(0) == 0
        assert state.first_face_up(6) == 6
        state.tableau[6].clear()
        assert state.first_face_up(6) is None

    def test_waste_top(self, state):
        """Test reading the top waste card."""
        assert state.waste_top() is None
        state.waste.append(state.stock.pop())
        assert state.waste_top().key == (Suit.DIAMONDS, Rank.JACK)

    def test_consistent_after_deal(self, state):
        assert state.is_consistent()

    def test_missing_card(self, state):
        """Test that a lost card breaks conservation."""
        state.stock.pop()
        assert not state.is_consistent()

    def test_duplicate_card(self, state):
        """Test that a duplicated card breaks conservation."""
        state.waste.append(Card(suit=Suit.HEARTS, rank=Rank.ACE))
        state.stock.pop()
        assert not state.is_consistent()

    def test_face_down_above_face_up(self, state):
        """Test the face-up suffix rule."""
        state.tableau[6][-1].face_up = False
        state.tableau[6][0].face_up = True
        assert not state.is_consistent()

    def test_foundation_out_of_order(self, state):
        """Test that a foundation must start at Ace of its suit."""
        card = state.stock.pop()
        card.face_up = True
        state.foundations[0].append(card)
        assert not state.is_consistent()

    def test_foundation_in_order(self, state):
        """Test a correctly built foundation."""
        ace = next(c for c in state.stock if c.key == (Suit.HEARTS, Rank.ACE))
        state.stock.remove(ace)
        state.foundations[0].append(ace)
        assert state.is_consistent()

    def test_str(self, state):
        assert "Stock 24" in str(state)
        assert "Score 1000" in str(state)
