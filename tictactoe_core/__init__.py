"""
Tic-tac-toe core Python package.

This package holds the board engine and the thin CLI around it so the
root game.py stays a small facade.
Modules:
- pieces.py: Player, Piece, Spot
- errors.py: MalformedError, BoardError and friends
- board.py: Board, Turn, Outcome, GameStatus
- config.py: GameConfig, load_config
- cli.py: input parsing and the play loop
"""
from .board import Board, Bound, GameStatus, Outcome, Position, Turn
from .errors import (
    BoardError,
    ConfigError,
    GameOverError,
    MalformedError,
    MalformedReason,
    OccupiedError,
    OutOfBoundsError,
    TicTacToeError,
)
from .pieces import Piece, Player, Spot

__all__ = [
    'Board',
    'BoardError',
    'Bound',
    'ConfigError',
    'GameOverError',
    'GameStatus',
    'MalformedError',
    'MalformedReason',
    'OccupiedError',
    'OutOfBoundsError',
    'Outcome',
    'Piece',
    'Player',
    'Position',
    'Spot',
    'TicTacToeError',
    'Turn',
]
