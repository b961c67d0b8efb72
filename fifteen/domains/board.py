from __future__ import annotations
from typing import Dict, List, Tuple
import logging

import numpy as np

from fifteen.errors import DimensionError, IllegalMove

logger = logging.getLogger(__name__)

DIM_MIN = 3
DIM_MAX = 9
BLANK = 0

Cell = Tuple[int, int]


def check_dimension(d: int) -> int:
    if d < DIM_MIN or d > DIM_MAX:
        raise DimensionError(DIM_MIN, DIM_MAX)
    return d


class Board:
    """d×d sliding-tile board (0 is the blank), mutated in place by moves."""
    def __init__(self, rows):
        grid = np.array(rows, dtype=int)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] < 2:
            raise ValueError(f"board must be a square grid, got shape {grid.shape}")
        d = grid.shape[0]
        if sorted(grid.ravel().tolist()) != list(range(d * d)):
            raise ValueError("board must hold each of 0..d*d-1 exactly once")
        self.d = d
        self.size = d * d
        self.grid = grid
        self.GOAL = np.array(list(range(1, self.size)) + [BLANK]).reshape(d, d)
        # Neighbors of each cell, in up/down/left/right order; edges simply
        # have fewer entries.
        self._nei: Dict[Cell, Tuple[Cell, ...]] = {}
        for r in range(d):
            for c in range(d):
                cells = []
                if r > 0:       cells.append((r - 1, c))
                if r < d - 1:   cells.append((r + 1, c))
                if c > 0:       cells.append((r, c - 1))
                if c < d - 1:   cells.append((r, c + 1))
                self._nei[(r, c)] = tuple(cells)

    # ---------- Construction ----------
    @classmethod
    def initial(cls, d: int) -> "Board":
        """Descending fill d*d-1 .. 1 with the blank bottom-right.

        For even d the descending order has the wrong parity, so the two
        tiles left of the blank are exchanged.
        """
        check_dimension(d)
        values = list(range(d * d - 1, 0, -1)) + [BLANK]
        board = cls(np.array(values).reshape(d, d))
        if d % 2 == 0:
            g = board.grid
            g[d - 1, d - 3], g[d - 1, d - 2] = g[d - 1, d - 2], g[d - 1, d - 3]
        logger.debug("initialized %dx%d board", d, d)
        return board

    def copy(self) -> "Board":
        return Board(self.grid.copy())

    # ---------- Queries ----------
    @property
    def blank(self) -> Cell:
        r, c = np.argwhere(self.grid == BLANK)[0]
        return int(r), int(c)

    def rows(self) -> List[List[int]]:
        return self.grid.tolist()

    def won(self) -> bool:
        """True iff row-major order reads 1..d*d-1 followed by the blank."""
        return bool(np.array_equal(self.grid, self.GOAL))

    # ---------- Core dynamics ----------
    def move(self, tile: int) -> bool:
        """Slide `tile` into the blank if it borders it; report success."""
        z = self.blank
        for cell in self._nei[z]:
            if self.grid[cell] == tile:
                self.grid[z] = tile
                self.grid[cell] = BLANK
                logger.debug("moved %d from %s to %s", tile, cell, z)
                return True
        return False

    def slide(self, tile: int) -> None:
        if not self.move(tile):
            raise IllegalMove(tile)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self):
        return f"Board({self.rows()!r})"
