from __future__ import annotations
from typing import List, Optional, Sequence

from eightpuzzle.domains.puzzle8 import Move, PuzzleState

def reconstruct_path(nodes: Sequence, idx: Optional[int]) -> List[PuzzleState]:
    """Walk parent indices from nodes[idx] back to the root, return start..goal."""
    path: List[PuzzleState] = []
    while idx is not None:
        node = nodes[idx]
        path.append(node.state)
        idx = node.parent
    path.reverse()
    return path

def step_move(a: PuzzleState, b: PuzzleState) -> Optional[Move]:
    for mv, s2 in a.moves():
        if s2 == b:
            return mv
    return None

def annotate_moves(path: Sequence[PuzzleState]) -> List[Move]:
    """One Move per transition of *path*. Raises ValueError on a broken chain."""
    out: List[Move] = []
    for i in range(1, len(path)):
        mv = step_move(path[i-1], path[i])
        if mv is None:
            raise ValueError(f"step {i}: {path[i]} is not one blank swap from {path[i-1]}")
        out.append(mv)
    return out

def is_move_chain(path: Sequence[PuzzleState]) -> bool:
    """True if *path* is non-empty, every step is a legal move and it ends at the goal."""
    if not path or not path[-1].is_goal():
        return False
    return all(step_move(path[i-1], path[i]) is not None for i in range(1, len(path)))
