#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import List, Optional, Sequence

from eightpuzzle.domains.puzzle8 import Move, PuzzleState
from eightpuzzle.search.path import annotate_moves

def draw_board(state: PuzzleState, out_path: Path, title: Optional[str] = None):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, 3); ax.set_ylim(0, 3)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(4):
        ax.plot([0,3],[i,i], linewidth=1)
        ax.plot([i,i],[0,3], linewidth=1)
    # tiles
    for idx, t in enumerate(state.tiles):
        if t == 0: continue
        r, c = divmod(idx, 3)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def draw_path(path: Sequence[PuzzleState], outdir: Path) -> List[Path]:
    """Save one PNG per step of *path*; returns the written files in order."""
    moves: List[Optional[Move]] = [None] + annotate_moves(path)
    out = []
    for i, (s, mv) in enumerate(zip(path, moves)):
        title = f"step {i}" if mv is None else f"step {i}: {mv}"
        p = outdir / f"step_{i:03d}.png"
        draw_board(s, p, title)
        out.append(p)
    return out

def main():
    from eightpuzzle.cli import parse_tiles
    from eightpuzzle.solver import ALGORITHMS, DEFAULT_DEPTH_CEILING, SOLVED, solve

    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=ALGORITHMS, default="astar")
    p.add_argument("--tiles", nargs=9, required=True, help="nine numbers, 0 is the blank")
    p.add_argument("--max_depth", type=int, default=DEFAULT_DEPTH_CEILING)
    p.add_argument("--outdir", default="figs/example_path")
    args = p.parse_args()

    try:
        start = PuzzleState.from_tiles(parse_tiles(args.tiles))
    except ValueError as e:
        p.error(str(e))

    res = solve(start, args.algo, depth_ceiling=args.max_depth)
    if res.status != SOLVED:
        print(f"No path ({res.status}).")
        return

    files = draw_path(res.path, Path(args.outdir))
    print(f"Saved {len(files)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
