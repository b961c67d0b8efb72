from __future__ import annotations
import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from fifteen.domains.board import DIM_MAX, DIM_MIN, Board, check_dimension
from fifteen.errors import DimensionError, FifteenError, UsageError
from fifteen.game.loop import play
from fifteen.game.movelog import MoveLog
from fifteen.game.render import greet

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    dimension: int
    log: Path = Path("log.txt")
    delay: float = 0.5
    greet_delay: float = 2.0
    greet: bool = True
    snapshot: Optional[Path] = None
    verbose: bool = False


class _Parser(argparse.ArgumentParser):
    # argparse exits with 2 on bad usage; that code belongs to bad dimensions.
    def error(self, message):
        raise UsageError()


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(prog="fifteen", description="Game of Fifteen on a d x d board")
    ap.add_argument("d", help=f"board dimension, {DIM_MIN}..{DIM_MAX}")
    ap.add_argument("--log", type=Path, default=Path("log.txt"), help="move log file (truncated)")
    ap.add_argument("--delay", type=float, default=0.5, help="pause after each frame, seconds (0 = none)")
    ap.add_argument("--greet_delay", "--greet-delay", type=float, default=2.0,
                    help="how long the welcome screen stays up")
    ap.add_argument("--no_greet", "--no-greet", action="store_true", help="skip the welcome screen")
    ap.add_argument("--snapshot", type=Path, default=None, help="save the final board as a PNG")
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    return ap


def parse_args(argv: Optional[List[str]] = None) -> GameConfig:
    args = build_parser().parse_args(argv)
    try:
        d = int(args.d)
    except ValueError:
        raise DimensionError(DIM_MIN, DIM_MAX) from None
    return GameConfig(
        dimension=check_dimension(d),
        log=args.log,
        delay=args.delay,
        greet_delay=args.greet_delay,
        greet=not args.no_greet,
        snapshot=args.snapshot,
        verbose=args.verbose,
    )


def run(cfg: GameConfig, inp=None, out=None, sleep=time.sleep) -> int:
    inp = inp or sys.stdin
    out = out or sys.stdout
    with MoveLog(cfg.log) as log:
        if cfg.greet:
            greet(out)
            if cfg.greet_delay > 0:
                sleep(cfg.greet_delay)
        board = Board.initial(cfg.dimension)
        outcome = play(board, log, inp=inp, out=out, delay=cfg.delay, sleep=sleep)
    logger.debug("session ended: %s", outcome.value)

    if cfg.snapshot is not None:
        from fifteen.game.snapshot import draw_board
        path = draw_board(board, cfg.snapshot)
        print(f"Saved {path}", file=out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = parse_args(argv)
    except FifteenError as e:
        print(e)
        return e.exit_code

    logging.basicConfig(level=logging.DEBUG if cfg.verbose else logging.WARNING)
    try:
        return run(cfg)
    except FifteenError as e:
        print(e, file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
