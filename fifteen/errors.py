from __future__ import annotations


class FifteenError(Exception):
    """Base error; `exit_code` is what the command line returns for it."""
    exit_code = 1


class UsageError(FifteenError):
    exit_code = 1

    def __init__(self, message: str = "Usage: fifteen d"):
        super().__init__(message)


class DimensionError(FifteenError):
    exit_code = 2

    def __init__(self, lo: int, hi: int):
        super().__init__(
            f"Board must be between {lo} x {lo} and {hi} x {hi}, inclusive."
        )
        self.lo = lo
        self.hi = hi


class LogFileError(FifteenError):
    exit_code = 3


class IllegalMove(FifteenError):
    """Tile is not orthogonally adjacent to the empty slot."""

    def __init__(self, tile: int):
        super().__init__(f"Illegal move: {tile}")
        self.tile = tile


class OutOfRangeInput(FifteenError):
    """Tile value larger than the number of cells on the board."""

    def __init__(self, tile: int, limit: int):
        super().__init__(f"Tile {tile} is out of range (max {limit})")
        self.tile = tile
        self.limit = limit
