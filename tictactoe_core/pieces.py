from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Player(Enum):
    """The owner of the current turn."""
    X = 'X'
    O = 'O'

    def toggle(self) -> 'Player':
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.value


class Piece(Enum):
    """The mark a player leaves on a spot."""
    X = 'X'
    O = 'O'

    @classmethod
    def of(cls, player: Player) -> 'Piece':
        return cls(player.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Spot:
    """A single board cell: empty when piece is None."""
    piece: Optional[Piece] = None

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    def __str__(self) -> str:
        return ' ' if self.piece is None else str(self.piece)


EMPTY = Spot()


def occupied(piece: Piece) -> Spot:
    return Spot(piece)
