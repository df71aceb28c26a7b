"""Board state: move generation, goal test, value semantics."""

from __future__ import annotations

import pytest

from eightpuzzle.domains.puzzle8 import GOAL, GOAL_TILES, Move, PuzzleState
from eightpuzzle.heuristics.manhattan import manhattan

from conftest import board


def test_from_tiles_caches_blank_index() -> None:
    s = board(1, 2, 3, 4, 0, 5, 6, 7, 8)
    assert s.blank == 4
    assert s.tiles == (1, 2, 3, 4, 0, 5, 6, 7, 8)


def test_goal() -> None:
    assert GOAL.tiles == GOAL_TILES
    assert GOAL.is_goal()
    assert board(*GOAL_TILES).is_goal()
    assert not board(1, 2, 3, 4, 5, 6, 7, 0, 8).is_goal()


@pytest.mark.parametrize(
    "blank, expected",
    [
        # corner: right, down
        (0, [("right", 1), ("down", 3)]),
        # centre: left, right, up, down
        (4, [("left", 3), ("right", 5), ("up", 1), ("down", 7)]),
        # bottom edge: left, right, up
        (7, [("left", 6), ("right", 8), ("up", 4)]),
        # corner: left, up
        (8, [("left", 7), ("up", 5)]),
    ],
)
def test_moves_fixed_order(blank: int, expected: list[tuple[str, int]]) -> None:
    tiles = [t for t in range(1, 9)]
    tiles.insert(blank, 0)
    s = board(*tiles)

    moves = s.moves()
    assert [(mv.direction, nxt.blank) for mv, nxt in moves] == expected
    for mv, nxt in moves:
        # the tile that slid now sits where the blank was
        assert nxt.tiles[blank] == mv.tile
        assert nxt.tiles[nxt.blank] == 0
        assert sorted(nxt.tiles) == list(range(9))


def test_neighbors_do_not_mutate_source() -> None:
    s = board(8, 1, 2, 7, 0, 3, 6, 5, 4)
    before = s.tiles
    nbrs = s.neighbors()
    assert len(nbrs) == 4
    assert s.tiles == before
    assert len(set(nbrs)) == 4
    assert s not in nbrs


def test_equality_and_hash_follow_tiles() -> None:
    a = board(1, 2, 3, 4, 5, 6, 0, 7, 8)
    b = PuzzleState((1, 2, 3, 4, 5, 6, 0, 7, 8), 6)
    assert a == b
    assert hash(a) == hash(b)
    assert {a: 1}[b] == 1
    assert a != board(1, 2, 3, 4, 5, 6, 7, 0, 8)


def test_state_is_immutable() -> None:
    s = board(*GOAL_TILES)
    with pytest.raises(AttributeError):
        s.blank = 0  # type: ignore[misc]


def test_display() -> None:
    s = board(8, 1, 2, 7, 0, 3, 6, 5, 4)
    assert str(s) == "8 1 2 7 0 3 6 5 4"
    assert s.rows() == [(8, 1, 2), (7, 0, 3), (6, 5, 4)]
    assert str(Move(5, "up")) == "moved 5 (blank up)"


def test_manhattan() -> None:
    assert manhattan(GOAL) == 0
    assert manhattan(board(1, 2, 3, 4, 5, 6, 0, 7, 8)) == 2
    assert manhattan(board(8, 1, 2, 7, 0, 3, 6, 5, 4)) == 14


def test_manhattan_is_admissible(distances, reachable) -> None:
    for s in reachable[::97]:
        assert manhattan(s) <= distances[s]


def test_manhattan_is_consistent(reachable) -> None:
    for s in reachable[::997]:
        for nxt in s.neighbors():
            assert abs(manhattan(s) - manhattan(nxt)) == 1
