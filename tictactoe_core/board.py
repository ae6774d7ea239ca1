from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import (
    GameOverError,
    MalformedError,
    MalformedReason,
    OccupiedError,
    OutOfBoundsError,
)
from .pieces import EMPTY, Piece, Player, Spot, occupied

logger = logging.getLogger(__name__)

Position = Tuple[int, int]  # (row, col), zero-indexed


class Bound(Enum):
    """Which axis of a position fell outside the board."""
    ROW = 'row'
    COL = 'col'
    BOTH = 'both'


class Outcome(Enum):
    NEXT = 'next'
    WIN = 'win'
    DRAW = 'draw'


class GameStatus(Enum):
    IN_PROGRESS = 'in progress'
    WON = 'won'
    DRAW = 'draw'


@dataclass(frozen=True)
class Turn:
    """Result of an accepted move. winner is set only for Outcome.WIN."""
    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def next(cls) -> 'Turn':
        return cls(Outcome.NEXT)

    @classmethod
    def win(cls, player: Player) -> 'Turn':
        return cls(Outcome.WIN, player)

    @classmethod
    def draw(cls) -> 'Turn':
        return cls(Outcome.DRAW)

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.NEXT


class Board:
    """
    A rows x cols tic-tac-toe board and the player whose turn it is.

    Spots are stored row-major in a list whose length never changes after
    construction. X always moves first.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0:
            raise MalformedError(MalformedReason.ZERO_ROWS)
        if cols <= 0:
            raise MalformedError(MalformedReason.ZERO_COLS)
        self._rows = rows
        self._cols = cols
        self._table: List[Spot] = [EMPTY] * (rows * cols)
        self._player = Player.X
        self._status = GameStatus.IN_PROGRESS
        self._winner: Optional[Player] = None
        logger.debug("Created %dx%d board", rows, cols)

    @classmethod
    def with_length(cls, length: int, cols: int) -> 'Board':
        """Builds a board from its total number of spots and its column count."""
        if cols <= 0:
            raise MalformedError(MalformedReason.ZERO_COLS)
        if length % cols != 0:
            raise MalformedError(MalformedReason.UNEVEN_LENGTH)
        return cls(length // cols, cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def current_player(self) -> Player:
        return self._player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def turn(self, pos: Position) -> Turn:
        """
        Places the current player's piece at pos and reports what happened.

        Raises OutOfBoundsError or OccupiedError (both BoardError) without
        touching the board, and GameOverError once the game has finished.
        """
        if self._status is not GameStatus.IN_PROGRESS:
            raise GameOverError()
        idx = self._set_piece(pos)

        if self._check_win(idx):
            self._status = GameStatus.WON
            self._winner = self._player
            logger.info("Player %s won", self._player)
            return Turn.win(self._player)
        if self.is_full():
            self._status = GameStatus.DRAW
            logger.info("Game ended in a draw")
            return Turn.draw()
        self._player = self._player.toggle()
        return Turn.next()

    def to_linear(self, pos: Position) -> int:
        """Converts (row, col) to an index into the row-major table."""
        row, col = pos
        row_oob = not 0 <= row < self._rows
        col_oob = not 0 <= col < self._cols
        if row_oob and col_oob:
            raise OutOfBoundsError(Bound.BOTH)
        if row_oob:
            raise OutOfBoundsError(Bound.ROW)
        if col_oob:
            raise OutOfBoundsError(Bound.COL)
        return col + self._cols * row

    def spot(self, pos: Position) -> Spot:
        return self._table[self.to_linear(pos)]

    def is_full(self) -> bool:
        return all(not spot.is_empty for spot in self._table)

    def empty_positions(self) -> List[Position]:
        return [divmod(idx, self._cols) for idx, spot in enumerate(self._table) if spot.is_empty]

    def _set_piece(self, pos: Position) -> int:
        try:
            idx = self.to_linear(pos)
        except OutOfBoundsError as e:
            logger.debug("Rejected %s for %s: %s out of range", pos, self._player, e.bound.value)
            raise
        if not self._table[idx].is_empty:
            logger.debug("Rejected %s for %s: occupied", pos, self._player)
            raise OccupiedError()
        self._table[idx] = occupied(Piece.of(self._player))
        logger.debug("Player %s placed at %s", self._player, pos)
        return idx

    def _line_is_mine(self, indices: Iterable[int]) -> bool:
        mine = occupied(Piece.of(self._player))
        return all(self._table[i] == mine for i in indices)

    def _row_indices(self, idx: int) -> Iterator[int]:
        start = (idx // self._cols) * self._cols
        return iter(range(start, start + self._cols))

    def _col_indices(self, idx: int) -> Iterator[int]:
        return iter(range(idx % self._cols, len(self._table), self._cols))

    def _check_diagonals(self, idx: int) -> bool:
        n = self._cols
        # Primary diagonal: 0, n+1, 2(n+1), ...
        if idx % (n + 1) == 0:
            if self._line_is_mine(i * (n + 1) for i in range(n)):
                return True
        # Secondary diagonal: n-1, 2(n-1), ..., n(n-1)
        if n > 1 and idx % (n - 1) == 0:
            if self._line_is_mine((i + 1) * (n - 1) for i in range(n)):
                return True
        return False

    def _check_win(self, idx: int) -> bool:
        if self._line_is_mine(self._row_indices(idx)):
            return True
        if self._line_is_mine(self._col_indices(idx)):
            return True
        return self.is_square and self._check_diagonals(idx)

    def render(self) -> str:
        """Rows with '|' between spots and a dash line between rows."""
        lines: List[str] = []
        separator = '-' * (2 * self._cols - 1)
        for r in range(self._rows):
            row = self._table[r * self._cols:(r + 1) * self._cols]
            lines.append('|'.join(str(spot) for spot in row))
            if r != self._rows - 1:
                lines.append(separator)
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self._rows}, cols={self._cols}, player={self._player}, status={self._status.name})"
