"""Main entry point for the Klondike terminal game."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from klondike_engine.config import load_config
from klondike_engine.game.engine import GameEngine
from klondike_engine.logging import GameLogConfig, GameLogger
from klondike_engine.models.game_state import GameState
from klondike_engine.models.move import (
    FoundationSource,
    FoundationTarget,
    MoveSource,
    MoveTarget,
    TableauSource,
    TableauTarget,
    WasteSource,
)
from klondike_engine.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def _pile_number(token: str, prefix: str) -> int | None:
    """Parse "t3" / "f2" style tokens to a zero-based index."""
    if not token.startswith(prefix) or not token[len(prefix):].isdigit():
        return None
    return int(token[len(prefix):]) - 1


def parse_source_token(token: str, state: GameState) -> MoveSource | None:
    """Parse a move source token.

    Args:
        token: "w", "fN", "tN" (whole face-up run) or "tN:K" (from the
            K-th card of column N, 1-based).
        state: Current state, used to find the face-up run.

    Returns:
        Move source, or None if the token cannot be parsed.
    """
    token = token.lower()
    if token == "w":
        return WasteSource()

    if token.startswith("f"):
        index = _pile_number(token, "f")
        return FoundationSource(index=index) if index is not None else None

    column_token, _, card_token = token.partition(":")
    column = _pile_number(column_token, "t")
    if column is None:
        return None

    if card_token:
        if not card_token.isdigit():
            return None
        return TableauSource(column=column, start_index=int(card_token) - 1)

    start = None
    if 0 <= column < len(state.tableau):
        start = state.first_face_up(column)
    return TableauSource(column=column, start_index=start if start is not None else 0)


def parse_target_token(token: str) -> MoveTarget | None:
    """Parse a move target token ("f" or "tN")."""
    token = token.lower()
    if token.startswith("f"):
        return FoundationTarget(index=_pile_number(token, "f"))
    column = _pile_number(token, "t")
    return TableauTarget(column=column) if column is not None else None


def run_session(
    engine: GameEngine,
    display: GameDisplay,
    commands: TextIO,
) -> None:
    """Read commands until quit or end of input.

    Args:
        engine: Game engine to drive
        display: Output display
        commands: Command input stream
    """
    engine.set_callbacks(on_win=display.print_win)
    display.print_state(engine.get_state())

    for line in commands:
        parts = line.split()
        if not parts:
            continue
        command = parts[0].lower()

        if command in ("q", "quit"):
            break
        elif command in ("h", "help"):
            display.print_help()
            continue
        elif command in ("d", "draw"):
            state = engine.draw()
        elif command in ("r", "recycle"):
            state = engine.recycle_stock_from_waste()
        elif command in ("n", "new"):
            state = engine.new_game()
        elif command in ("m", "move") and len(parts) == 3:
            current = engine.get_state()
            source = parse_source_token(parts[1], current)
            target = parse_target_token(parts[2])
            if source is None or target is None:
                display.print_rejected(f"cannot parse {parts[1]} {parts[2]}")
                continue
            result = engine.attempt_move(source, target)
            if not result.applied:
                display.print_rejected(result.reason)
            state = result.state
        else:
            print(f"Unknown command: {line.strip()} (h for help)")
            continue

        display.print_state(state)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="Klondike solitaire in the terminal")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        help="Reveal face-down cards",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Path of JSONL game event log",
    )

    args = parser.parse_args()

    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hidden:
        config.logging.show_hidden = True
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))

    setup_logging(config.logging.level)
    display = GameDisplay(show_hidden=config.logging.show_hidden)

    try:
        with GameLogger(config.game_log) as game_logger:
            engine = GameEngine(config, game_logger)
            display.print_help()
            run_session(engine, display, sys.stdin)
        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
