"""Entry points used by the CLI and the experiment runner.

``check_solvable`` is the parity gate; ``solve_a_star`` and
``solve_backtracking`` return the start..goal list of states or ``None``.
``solve`` wraps the three and reports the outcome as an ``Outcome`` value,
keeping "unsolvable" apart from "no solution within the search limits".
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from eightpuzzle.domains.puzzle8 import Move, PuzzleState, is_solvable
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.dfs import iddfs
from eightpuzzle.search.path import annotate_moves

DEFAULT_DEPTH_CEILING = 50
ALGORITHMS = ("astar", "backtracking")

SOLVED = "solved"
UNSOLVABLE = "unsolvable"
NO_SOLUTION = "no_solution"

def check_solvable(state: PuzzleState) -> bool:
    return is_solvable(state)

def solve_a_star(state: PuzzleState, tie_break: str = "h") -> Optional[List[PuzzleState]]:
    return a_star(state, tie_break=tie_break)["path"]

def solve_backtracking(state: PuzzleState, depth_ceiling: int = DEFAULT_DEPTH_CEILING) -> Optional[List[PuzzleState]]:
    return iddfs(state, max_depth=depth_ceiling)["path"]

@dataclass
class Outcome:
    status: str
    algorithm: str
    path: List[PuzzleState] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    stats: dict = field(default_factory=dict)

    @property
    def move_count(self) -> Optional[int]:
        return len(self.path) - 1 if self.path else None

    @property
    def time_sec(self) -> float:
        return self.stats.get("time", 0.0)

def search(state: PuzzleState, algorithm: str, depth_ceiling: int = DEFAULT_DEPTH_CEILING,
           tie_break: str = "h") -> dict:
    """Run one search and return its instrumented result dict."""
    if algorithm == "astar":
        return a_star(state, tie_break=tie_break)
    if algorithm == "backtracking":
        return iddfs(state, max_depth=depth_ceiling)
    raise ValueError(f"unknown algorithm {algorithm!r}, expected one of {ALGORITHMS}")

def solve(state: PuzzleState, algorithm: str = "astar", depth_ceiling: int = DEFAULT_DEPTH_CEILING,
          tie_break: str = "h") -> Outcome:
    if algorithm not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {algorithm!r}, expected one of {ALGORITHMS}")
    if not check_solvable(state):
        return Outcome(UNSOLVABLE, algorithm)

    res = search(state, algorithm, depth_ceiling=depth_ceiling, tie_break=tie_break)
    path = res["path"]
    if path is None:
        return Outcome(NO_SOLUTION, algorithm, stats=res)
    return Outcome(SOLVED, algorithm, path=path, moves=annotate_moves(path), stats=res)
