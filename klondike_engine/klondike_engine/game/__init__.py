"""Game logic."""

from .deal import deal
from .engine import GameEngine, MoveResult, check_win
from .executor import apply_move
from .stock import draw, recycle
from .validator import FOUNDATION_INDEX, MoveValidator, ValidationResult

__all__ = [
    "FOUNDATION_INDEX",
    "GameEngine",
    "MoveResult",
    "MoveValidator",
    "ValidationResult",
    "apply_move",
    "check_win",
    "deal",
    "draw",
    "recycle",
]
