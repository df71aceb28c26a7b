#!/usr/bin/env python3
"""Terminal front end: read a board, run one solver, print the steps."""
from __future__ import annotations
import argparse, sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from eightpuzzle.domains.puzzle8 import PuzzleState
from eightpuzzle.search.a_star import TIE_BREAKS
from eightpuzzle.solver import (
    ALGORITHMS, DEFAULT_DEPTH_CEILING, NO_SOLUTION, UNSOLVABLE, Outcome, solve,
)

def parse_tiles(tokens: Iterable) -> Tuple[int, ...]:
    """Validate nine values forming a permutation of 0..8."""
    toks = list(tokens)
    if len(toks) != 9:
        raise ValueError(f"expected 9 numbers, got {len(toks)}")
    try:
        tiles = tuple(int(t) for t in toks)
    except (TypeError, ValueError):
        raise ValueError(f"tiles must be integers: {' '.join(map(str, toks))}") from None
    if sorted(tiles) != list(range(9)):
        raise ValueError("tiles must be a permutation of 0..8 (0 is the blank)")
    return tiles

def prompt(read: Optional[Callable[[str], str]] = None, algo: Optional[str] = None) -> Tuple[str, Tuple[int, ...]]:
    """Interactive mode: ask for the solver (unless given), then the nine numbers."""
    read = read or input
    while algo is None:
        choice = read("Choose solver: 0 = A* , 1 = Backtracking : ").strip()
        if choice in ("0", "1"):
            algo = "astar" if choice == "0" else "backtracking"
        else:
            print("Please enter 0 or 1.")
    while True:
        line = read("Enter the 9 puzzle numbers separated by spaces (use 0 for blank): ")
        try:
            return algo, parse_tiles(line.split())
        except ValueError as e:
            print(f"Invalid puzzle: {e}")

def report(res: Outcome) -> List[str]:
    if res.status == UNSOLVABLE:
        return ["The given puzzle is unsolvable."]
    if res.status == NO_SOLUTION:
        return ["No solution found within limits."]
    lines = [
        f"Solution found in {res.move_count} moves.",
        f"Time taken: {res.time_sec * 1000:.0f} ms",
        "Steps:",
    ]
    for i, s in enumerate(res.path):
        if i == 0:
            lines.append(f"Step {i}: {s}")
        else:
            lines.append(f"Step {i}: {s}  ({res.moves[i-1]})")
    return lines

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="8-puzzle solver (A* or iterative-deepening backtracking)")
    ap.add_argument("--algo", choices=ALGORITHMS, default=None,
                    help="solver to use; prompts when --tiles is not given")
    ap.add_argument("--tiles", nargs=9, default=None, metavar="N", help="nine numbers, 0 is the blank")
    ap.add_argument("--max_depth", type=int, default=DEFAULT_DEPTH_CEILING,
                    help="depth ceiling for backtracking")
    ap.add_argument("--tie_break", choices=TIE_BREAKS, default="h",
                    help="A* ordering among equal f")
    ap.add_argument("--frames", type=Path, default=None, help="save a PNG per step into this directory")
    args = ap.parse_args(argv)

    if args.max_depth < 0:
        ap.error("--max_depth must be >= 0")

    if args.tiles is None:
        try:
            algo, tiles = prompt(algo=args.algo)
        except EOFError:
            ap.exit(1, "\nNo puzzle given.\n")
    else:
        try:
            tiles = parse_tiles(args.tiles)
        except ValueError as e:
            ap.error(str(e))
        algo = args.algo or "astar"

    res = solve(PuzzleState.from_tiles(tiles), algo,
                depth_ceiling=args.max_depth, tie_break=args.tie_break)
    for line in report(res):
        print(line)

    if args.frames is not None and res.path:
        from eightpuzzle.experiments.visualize_path import draw_path
        files = draw_path(res.path, args.frames)
        print(f"Saved {len(files)} frames to {args.frames}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
