from __future__ import annotations
from typing import Optional, TextIO
import sys

from fifteen.domains.board import BLANK, Board

CLEAR = "\033[2J\033[0;0H"
GREETING = "WELCOME TO GAME OF FIFTEEN"


def clear(out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    out.write(CLEAR)


def greet(out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    clear(out)
    out.write(GREETING + "\n")
    out.flush()


def draw(board: Board) -> str:
    """Text frame: two blank lines, then each row boxed in `|` cells."""
    lines = ["\n\n"]
    for row in board.rows():
        cells = ["    " if v == BLANK else f" {v:2d} " for v in row]
        lines.append("|" + "|".join(cells) + "|\n\n")
    return "".join(lines)
