"""A*: optimality against the BFS oracle, path shape, instrumentation."""

from __future__ import annotations

import pytest

from eightpuzzle.domains.puzzle8 import GOAL
from eightpuzzle.search.a_star import TIE_BREAKS, a_star
from eightpuzzle.search.bfs import bfs
from eightpuzzle.search.path import is_move_chain
from eightpuzzle.solver import solve_a_star

from conftest import board, sample_within


def test_already_solved() -> None:
    path = solve_a_star(GOAL)
    assert path == [GOAL]


def test_two_moves() -> None:
    start = board(1, 2, 3, 4, 5, 6, 0, 7, 8)
    path = solve_a_star(start)
    assert path is not None
    assert len(path) - 1 == 2
    assert path[0] == start
    assert is_move_chain(path)


def test_deep_instance_is_optimal(distances) -> None:
    start = board(8, 1, 2, 7, 0, 3, 6, 5, 4)
    res = a_star(start)
    assert res["termination"] == "ok"
    assert res["g"] == distances[start]
    assert len(res["path"]) - 1 == distances[start]
    assert is_move_chain(res["path"])
    assert res["path"][0] == start


def test_matches_bfs_reference() -> None:
    start = board(4, 1, 3, 7, 2, 6, 0, 5, 8)
    assert a_star(start)["g"] == bfs(start)["g"]


def test_optimal_on_sample(reachable, distances) -> None:
    for start in sample_within(reachable, distances, 31, 15, seed=1):
        path = solve_a_star(start)
        assert path is not None
        assert len(path) - 1 == distances[start], str(start)
        assert path[0] == start
        assert is_move_chain(path)


@pytest.mark.parametrize("tie_break", TIE_BREAKS)
def test_tie_break_keeps_length(tie_break: str, distances) -> None:
    start = board(8, 1, 2, 7, 0, 3, 6, 5, 4)
    res = a_star(start, tie_break=tie_break)
    assert res["tie_break"] == tie_break
    assert res["g"] == distances[start]
    assert is_move_chain(res["path"])


def test_unknown_tie_break() -> None:
    with pytest.raises(ValueError):
        a_star(GOAL, tie_break="random")


def test_repeated_calls_same_length() -> None:
    start = board(0, 1, 3, 4, 2, 5, 7, 8, 6)
    lengths = {len(solve_a_star(start)) for _ in range(3)}
    assert lengths == {5}


def test_instrumentation() -> None:
    res = a_star(board(1, 2, 3, 4, 0, 6, 7, 5, 8), return_path=False)
    assert res["path"] is None
    assert res["g"] == 2
    assert res["algorithm"] == "A*"
    assert res["expanded"] >= 2
    assert res["generated"] >= res["expanded"]
    assert res["peak_closed"] >= 3
    assert res["time"] >= 0.0


@pytest.mark.slow
def test_unsolvable_exhausts_frontier() -> None:
    res = a_star(board(1, 2, 3, 4, 5, 6, 8, 7, 0))
    assert res["path"] is None
    assert res["g"] is None
    assert res["termination"] == "exhausted"
    # every board of the other parity class gets a cost entry
    assert res["peak_closed"] == 181440
