from __future__ import annotations
from pathlib import Path
from typing import Optional, TextIO
import logging

from fifteen.domains.board import Board
from fifteen.errors import LogFileError

logger = logging.getLogger(__name__)


class MoveLog:
    """Write-only session log: one `|`-joined line per row per frame, then the move.

    Opened with truncation; every write is flushed so the file is usable
    even if the process dies mid-game.
    """
    def __init__(self, path: Path):
        self.path = Path(path)
        self._f: Optional[TextIO] = None

    def open(self) -> "MoveLog":
        try:
            self._f = self.path.open("w")
        except OSError as e:
            raise LogFileError(f"Could not open log file {self.path}: {e}") from e
        logger.debug("logging moves to %s", self.path)
        return self

    def close(self) -> None:
        if self._f is not None:
            self._f.close()
            self._f = None

    def __enter__(self) -> "MoveLog":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._f is None

    def _write(self, text: str) -> None:
        if self._f is None:
            raise ValueError("move log is not open")
        self._f.write(text)
        self._f.flush()

    def board(self, board: Board) -> None:
        self._write("".join("|".join(str(v) for v in row) + "\n" for row in board.rows()))

    def move(self, tile: int) -> None:
        self._write(f"{tile}\n")
