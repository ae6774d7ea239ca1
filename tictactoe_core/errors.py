from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Bound


class TicTacToeError(Exception):
    """Base class for every error raised by tictactoe_core."""


class MalformedReason(Enum):
    ZERO_ROWS = 'board needs at least one row'
    ZERO_COLS = 'board needs at least one column'
    UNEVEN_LENGTH = 'board length is not divisible by the column count'


class MalformedError(TicTacToeError):
    """Raised when a board cannot be built from the given dimensions."""

    def __init__(self, reason: MalformedReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


class BoardError(TicTacToeError):
    """A rejected turn. The board is left untouched."""


class OutOfBoundsError(BoardError):
    def __init__(self, bound: 'Bound') -> None:
        super().__init__(f'position is out of the board ({bound.value})')
        self.bound = bound


class OccupiedError(BoardError):
    def __init__(self) -> None:
        super().__init__('position is already occupied')


class GameOverError(BoardError):
    def __init__(self) -> None:
        super().__init__('game is already over')


class ConfigError(TicTacToeError):
    """Raised for unusable configuration values."""
