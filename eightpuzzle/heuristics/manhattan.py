from typing import Dict, Tuple

from eightpuzzle.domains.puzzle8 import PuzzleState

# goal cell of tile v is index v-1, row-major
_goal_pos: Dict[int, Tuple[int, int]] = {t: divmod(t - 1, 3) for t in range(1, 9)}

def manhattan(s: PuzzleState) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s.tiles):
        if tile == 0:
            continue
        r, c = divmod(idx, 3)
        gr, gc = _goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
