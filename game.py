from __future__ import annotations

# Entry point for playing from a source checkout: `python game.py`.
# Board size and log level come from TICTACTOE_* environment variables.
# The names below are the public tictactoe_core API in one import.

import sys

from tictactoe_core.pieces import Piece, Player, Spot
from tictactoe_core.errors import (
    TicTacToeError,
    MalformedError,
    MalformedReason,
    BoardError,
    OutOfBoundsError,
    OccupiedError,
    GameOverError,
    ConfigError,
)
from tictactoe_core.board import Board, Bound, GameStatus, Outcome, Position, Turn
from tictactoe_core.config import GameConfig, load_config
from tictactoe_core.cli import parse_position, read_position, play_loop


def main() -> None:
    # CLI driver delegated to tictactoe_core.cli
    from tictactoe_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
