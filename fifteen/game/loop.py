from __future__ import annotations
from enum import Enum
from typing import Callable, Optional, TextIO
import logging
import sys
import time

from fifteen.domains.board import Board
from fifteen.errors import IllegalMove, OutOfRangeInput
from fifteen.game.movelog import MoveLog
from fifteen.game.render import clear, draw

logger = logging.getLogger(__name__)

PROMPT = "Tile to move: "


class Outcome(Enum):
    WON = "won"
    QUIT = "quit"


def parse_tile(text: str, limit: int) -> int:
    """Integer tile from one input line; values above `limit` are rejected."""
    tile = int(text.strip())
    if tile > limit:
        raise OutOfRangeInput(tile, limit)
    return tile


def read_move(board: Board, inp: TextIO, out: TextIO) -> Optional[int]:
    """Prompt until a usable value arrives; None means input is exhausted."""
    while True:
        out.write(PROMPT)
        out.flush()
        line = inp.readline()
        if not line:
            return None
        try:
            return parse_tile(line, board.size)
        except ValueError:
            out.write("\nPlease enter a tile number.\n")
        except OutOfRangeInput as e:
            logger.info("rejected out-of-range tile %d", e.tile)
            out.write(f"\nThere is no tile {e.tile} on a {board.d} x {board.d} board.\n")


def play(
    board: Board,
    log: MoveLog,
    inp: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    delay: float = 0.5,
    sleep: Callable[[float], None] = time.sleep,
) -> Outcome:
    """Render, log and accept moves until the board is won or the player quits.

    A tile of 0 or below (or end of input) quits.
    """
    inp = inp or sys.stdin
    out = out or sys.stdout

    def pause():
        if delay > 0:
            sleep(delay)

    turns = 0
    while True:
        clear(out)
        out.write(draw(board))
        out.flush()
        log.board(board)

        if board.won():
            out.write("ftw!\n")
            logger.info("won after %d moves", turns)
            return Outcome.WON

        tile = read_move(board, inp, out)
        if tile is None or tile <= 0:
            logger.info("quit after %d moves", turns)
            return Outcome.QUIT

        log.move(tile)
        try:
            board.slide(tile)
            turns += 1
        except IllegalMove:
            out.write("\nIllegal move.\n")
            pause()

        pause()
