from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, List
import heapq
from time import perf_counter
import itertools

from eightpuzzle.domains.puzzle8 import PuzzleState
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.search.path import reconstruct_path

TIE_BREAKS = ("h", "g", "fifo", "lifo")

@dataclass
class PQItem:
    f: int
    h: int
    g: int
    state: PuzzleState
    parent: Optional[int] = None  # index into the node table

def a_star(
    start: PuzzleState,
    hfun: Callable[[PuzzleState], int] = manhattan,
    tie_break: str = "h",
    return_path: bool = True,
):
    """
    A* with instrumentation.

    Nodes live in a growable table and point at their parent by index.
    Stale heap entries are not removed; when popped with a g worse than
    the best recorded for their state they are skipped.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"unknown tie_break {tie_break!r}")
    t0 = perf_counter()

    nodes: List[PQItem] = []
    open_heap: List[Tuple[Tuple[int, int, int], int]] = []
    counter = itertools.count()

    def priority_tuple(f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if tie_break == "h":   return (f, h, ctr)
        if tie_break == "g":   return (f, -g, ctr)
        if tie_break == "fifo":return (f, 0,  ctr)
        return (f, 0, -ctr)

    def push(item: PQItem) -> None:
        nodes.append(item)
        heapq.heappush(open_heap, (priority_tuple(item.f, item.g, item.h, next(counter)), len(nodes) - 1))

    h0 = hfun(start)
    push(PQItem(f=h0, h=h0, g=0, state=start, parent=None))
    best_g: Dict[PuzzleState, int] = {start: 0}

    expanded = 0
    generated = 0
    stale = 0
    peak_open = 1

    def result(path, g, termination):
        return {
            "path": path,
            "g": g,
            "expanded": expanded,
            "generated": generated,
            "stale": stale,
            "peak_open": peak_open,
            "peak_closed": len(best_g),
            "time": perf_counter() - t0,
            "algorithm": "A*",
            "tie_break": tie_break,
            "termination": termination,
        }

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, idx = heapq.heappop(open_heap)
        node = nodes[idx]
        if node.g > best_g[node.state]:
            stale += 1
            continue

        if node.state.is_goal():
            return result(reconstruct_path(nodes, idx) if return_path else None, node.g, "ok")

        expanded += 1
        g2 = node.g + 1
        for s2 in node.state.neighbors():
            generated += 1
            known = best_g.get(s2)
            if known is None or g2 < known:
                best_g[s2] = g2
                h2 = hfun(s2)
                push(PQItem(f=g2 + h2, h=h2, g=g2, state=s2, parent=idx))

    # Open exhausted without finding goal
    return result(None, None, "exhausted")
