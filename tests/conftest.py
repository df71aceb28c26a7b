from __future__ import annotations

import random

import pytest

from eightpuzzle.domains.puzzle8 import PuzzleState
from eightpuzzle.search.bfs import goal_distances


def board(*tiles: int) -> PuzzleState:
    return PuzzleState.from_tiles(tiles)


@pytest.fixture(scope="session")
def distances() -> dict[PuzzleState, int]:
    """Exact distance to the goal for all 181440 reachable boards."""
    return goal_distances()


@pytest.fixture(scope="session")
def reachable(distances) -> list[PuzzleState]:
    return sorted(distances, key=lambda s: s.tiles)


def sample_within(reachable, distances, max_moves: int, k: int, seed: int = 0) -> list[PuzzleState]:
    pool = [s for s in reachable if distances[s] <= max_moves]
    return random.Random(seed).sample(pool, k)
