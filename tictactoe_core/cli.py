from __future__ import annotations

import logging
import sys
from typing import List, Optional, Tuple

from .board import Board, Outcome, Position, Turn
from .config import load_config
from .errors import (
    ConfigError,
    MalformedError,
    OccupiedError,
    OutOfBoundsError,
)

logger = logging.getLogger(__name__)

PROMPT = 'Inform position (row column): '
MSG_ONE_COORD = 'Need to inform both coordinates! (row and column)'
MSG_NO_COORDS = 'Could not convert provided input to coordinates!'


def parse_position(text: str) -> Tuple[Optional[Position], Optional[str]]:
    """
    Pulls the first two non-negative integers out of a line of input.

    Only ASCII digits with an optional leading '+' count as an integer;
    other tokens are skipped. Returns (position, None) on success and
    (None, message) when fewer than two integers were found.
    """
    numbers: List[int] = []
    for token in text.split():
        digits = token[1:] if token.startswith('+') else token
        if not (digits.isascii() and digits.isdigit()):
            continue
        numbers.append(int(digits))
        if len(numbers) == 2:
            return (numbers[0], numbers[1]), None
    if len(numbers) == 1:
        return None, MSG_ONE_COORD
    return None, MSG_NO_COORDS


def read_position() -> Position:
    """Prompts until a position is entered. EOFError propagates to the caller."""
    while True:
        text = input(PROMPT)
        pos, message = parse_position(text)
        if pos is not None:
            return pos
        print(message)


def play_loop(board: Board) -> Turn:
    """Runs turns until someone wins or the board fills up."""
    result = Turn.next()
    while not result.is_over:
        print(f"Current player turn is: {board.current_player}")
        pos = read_position()
        try:
            result = board.turn(pos)
        except OccupiedError:
            print('This position is already occupied!')
        except OutOfBoundsError:
            print('Provided coordinates are out of the board!')
        else:
            if result.outcome is Outcome.WIN:
                print(f"Game over, player: {result.winner} won!")
            elif result.outcome is Outcome.DRAW:
                print("Game over, it's a draw!")
        print(board.render())
    return result


def main() -> int:
    try:
        config = load_config()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level_value,
        stream=sys.stderr,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        board = Board(config.rows, config.cols)
    except MalformedError as e:
        print(f"Cannot construct a board with the specified parameters: {e}")
        return 2

    try:
        play_loop(board)
    except (EOFError, OSError) as e:
        logger.error("Input failed: %r", e)
        print("error: could not read a position from input.", file=sys.stderr)
        return 1
    return 0
