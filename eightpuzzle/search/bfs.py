from collections import deque
from time import perf_counter
from typing import List, Optional, Dict

from eightpuzzle.domains.puzzle8 import GOAL, PuzzleState

def bfs(start: PuzzleState):
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[PuzzleState, Optional[PuzzleState]] = {start: None}
    expanded = generated = 0
    while q:
        s = q.popleft()
        if s.is_goal():
            # reconstruct
            path: List[PuzzleState] = []
            while s is not None:
                path.append(s); s = parent[s]
            path.reverse()
            return {"path": path, "g": len(path) - 1, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for s2 in s.neighbors():
            generated += 1
            if s2 in parent: continue
            parent[s2] = s; q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}

def goal_distances() -> Dict[PuzzleState, int]:
    """Shortest move count to GOAL for every reachable state (moves are reversible)."""
    dist: Dict[PuzzleState, int] = {GOAL: 0}
    q = deque([GOAL])
    while q:
        s = q.popleft()
        d = dist[s] + 1
        for s2 in s.neighbors():
            if s2 not in dist:
                dist[s2] = d
                q.append(s2)
    return dist
