from __future__ import annotations
from typing import Iterator, List, Optional, Set, Tuple
from time import perf_counter

from eightpuzzle.domains.puzzle8 import PuzzleState

def _bounded(start: PuzzleState, limit: int, stats: dict) -> Optional[List[PuzzleState]]:
    """One depth-limited pass. Cycle avoidance covers the current path only."""
    if start.is_goal():
        return [start]

    # stack holds: (state, depth, iterator_over_neighbors)
    stack: List[Tuple[PuzzleState, int, Iterator[PuzzleState]]] = [(start, 0, iter(start.neighbors()))]
    on_path: Set[PuzzleState] = {start}
    if limit > 0:
        stats["expanded"] += 1

    while stack:
        s, d, it = stack[-1]
        stats["peak_recursion"] = max(stats["peak_recursion"], d)

        s2 = next(it, None)
        if s2 is None or d + 1 > limit:
            # done with s
            on_path.discard(s)
            stack.pop()
            continue

        # avoid cycles along current path
        if s2 in on_path:
            continue

        stats["generated"] += 1
        if s2.is_goal():
            return [entry[0] for entry in stack] + [s2]

        if d + 1 < limit:
            stats["expanded"] += 1
            on_path.add(s2)
            stack.append((s2, d + 1, iter(s2.neighbors())))

    return None

def iddfs(start: PuzzleState, max_depth: int = 50, return_path: bool = True):
    """
    Iterative-deepening DFS: depth-limited passes with limit 0, 1, ..., max_depth.
    The first path found is length-minimal. "exhausted" means no solution
    within max_depth, not that the puzzle is unsolvable.
    """
    t0 = perf_counter()
    stats = {"expanded": 0, "generated": 0, "peak_recursion": 0}

    bound = -1
    path = None
    for bound in range(max_depth + 1):
        path = _bounded(start, bound, stats)
        if path is not None:
            break

    return {
        "path": path if return_path else None,
        "g": len(path) - 1 if path is not None else None,
        "expanded": stats["expanded"],
        "generated": stats["generated"],
        "peak_recursion": stats["peak_recursion"],
        "bound_final": bound,
        "time": perf_counter() - t0,
        "algorithm": "IDDFS",
        "termination": "ok" if path is not None else "exhausted",
    }
