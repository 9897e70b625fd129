"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from klondike_engine.models.card import Card
    from klondike_engine.models.game_state import GameState

CARD_WIDTH = 4


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_hidden: bool = False):
        """Initialize display.

        Args:
            show_hidden: Whether to reveal face-down cards
        """
        self.show_hidden = show_hidden

    def card_text(self, card: "Card | None") -> str:
        """Render one card cell."""
        if card is None:
            return "[  ]".ljust(CARD_WIDTH)
        if card.face_up:
            return str(card).ljust(CARD_WIDTH)
        if self.show_hidden:
            return f"({card})".ljust(CARD_WIDTH)
        return "##".ljust(CARD_WIDTH)

    def render(self, state: "GameState") -> list[str]:
        """Render the layout as text lines."""
        stock = "##" if state.stock else "[  ]"
        waste = self.card_text(state.waste_top())
        foundations = " ".join(
            self.card_text(pile[-1] if pile else None) for pile in state.foundations
        )
        lines = [
            f"Stock: {stock} ({len(state.stock)})  Waste: {waste}  "
            f"Foundations: {foundations}  Score: {state.score}",
            "",
            "  ".join(f"t{i + 1}".ljust(CARD_WIDTH) for i in range(len(state.tableau))),
        ]

        depth = max((len(column) for column in state.tableau), default=0)
        for row in range(depth):
            cells = []
            for column in state.tableau:
                if row < len(column):
                    cells.append(self.card_text(column[row]))
                else:
                    cells.append(" " * CARD_WIDTH)
            lines.append("  ".join(cells).rstrip())
        return lines

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_state(self, state: "GameState") -> None:
        """Print the full layout."""
        print()
        for line in self.render(state):
            print(line)

    def print_rejected(self, reason: str) -> None:
        """Print why a move was not applied."""
        print(f"  -> Illegal move: {reason}")

    def print_win(self, score: int) -> None:
        """Print win message."""
        self.print_separator()
        print(f"Congratulations! You won with {score} points.")
        self.print_separator()

    def print_help(self) -> None:
        """Print command help."""
        print("Commands:")
        print("  d, draw          draw a card from the stock")
        print("  r, recycle       turn the waste over into the stock")
        print("  m SRC DST        move cards")
        print("                   SRC: w | f1-f4 | t1-t7 | tN:K (K-th card of column N)")
        print("                   DST: f | t1-t7")
        print("  n, new           start a new game")
        print("  h, help          show this help")
        print("  q, quit          quit")
