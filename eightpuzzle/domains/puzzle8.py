from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, List, Iterable

Tiles = Tuple[int, ...]  # 9-length tuple, 0 is blank
GOAL_TILES: Tiles = (1, 2, 3, 4, 5, 6, 7, 8, 0)

# Precomputed blank moves on the 3x3 grid, fixed order: left, right, up, down
_DIRS = (("left", 0, -1), ("right", 0, 1), ("up", -1, 0), ("down", 1, 0))

def _blank_moves(i: int) -> Tuple[Tuple[str, int], ...]:
    r, c = divmod(i, 3)
    out = []
    for name, dr, dc in _DIRS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < 3 and 0 <= nc < 3:
            out.append((name, nr * 3 + nc))
    return tuple(out)

_NEI = {i: _blank_moves(i) for i in range(9)}


@dataclass(frozen=True)
class Move:
    """One step of a solution: which tile slid, and where the blank went."""
    tile: int
    direction: str

    def __str__(self) -> str:
        return f"moved {self.tile} (blank {self.direction})"


@dataclass(frozen=True)
class PuzzleState:
    """Immutable 3x3 board. Equality and hash depend on the tiles only."""
    tiles: Tiles
    blank: int = field(compare=False)

    @classmethod
    def from_tiles(cls, tiles: Iterable[int]) -> "PuzzleState":
        t = tuple(tiles)
        return cls(t, t.index(0))

    def moves(self) -> List[Tuple[Move, "PuzzleState"]]:
        """Return (move, next_state) for every legal blank swap."""
        i = self.blank
        out: List[Tuple[Move, PuzzleState]] = []
        for name, j in _NEI[i]:
            lst = list(self.tiles)
            lst[i], lst[j] = lst[j], lst[i]
            out.append((Move(self.tiles[j], name), PuzzleState(tuple(lst), j)))
        return out

    def neighbors(self) -> List["PuzzleState"]:
        return [s for _, s in self.moves()]

    def is_goal(self) -> bool:
        return self.tiles == GOAL_TILES

    def rows(self) -> List[Tiles]:
        return [self.tiles[3*r:3*r+3] for r in range(3)]

    def __str__(self) -> str:
        return " ".join(str(t) for t in self.tiles)


GOAL = PuzzleState(GOAL_TILES, 8)

def is_solvable(s: PuzzleState) -> bool:
    """8-puzzle solvability: parity of inversions (blank ignored) must be even."""
    arr = [x for x in s.tiles if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0
