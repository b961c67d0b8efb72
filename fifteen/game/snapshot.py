from __future__ import annotations
from pathlib import Path
import os

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fifteen.domains.board import BLANK, Board


def draw_board(board: Board, out_path: Path) -> Path:
    """Save the board as a PNG grid with tile numbers."""
    n = board.d
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for r, row in enumerate(board.rows()):
        for c, t in enumerate(row):
            if t == BLANK: continue
            ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
    return out_path
