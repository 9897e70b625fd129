"""Game models."""

from .card import Card, Color, Rank, Suit, build_deck, shuffle
from .game_state import GameState
from .move import (
    FoundationSource,
    FoundationTarget,
    MoveSource,
    MoveTarget,
    TableauSource,
    TableauTarget,
    WasteSource,
    parse_source,
    parse_target,
)

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "build_deck",
    "shuffle",
    "GameState",
    "FoundationSource",
    "FoundationTarget",
    "MoveSource",
    "MoveTarget",
    "TableauSource",
    "TableauTarget",
    "WasteSource",
    "parse_source",
    "parse_target",
]
