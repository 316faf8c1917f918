"""Unit tests for the A* shortest path."""

import pytest

from app.core.errors import NoPathFoundError
from app.solvers import build_graph, find_all_paths, find_shortest_path
from tests.grids import BLOCKED, OPEN_4, RING_ROAD, WALLED


def _solve(matrix):
    graph, start, end = build_graph(matrix)
    return find_shortest_path(graph, len(matrix), start, end)


def test_walled_grid_path_is_listed_end_first():
    path = _solve(WALLED)
    assert [p.as_tuple() for p in path] == [(2, 2), (2, 1), (2, 0), (1, 0), (0, 0)]


def test_disconnected_grid_raises():
    with pytest.raises(NoPathFoundError):
        _solve(BLOCKED)


def test_adjacent_start_and_end():
    path = _solve([[2, 1], [0, 0]])
    assert [p.as_tuple() for p in path] == [(0, 1), (0, 0)]


def test_open_grid_path_is_optimal_and_connected():
    graph, start, end = build_graph(OPEN_4)
    path = find_shortest_path(graph, 4, start, end)
    assert len(path) - 1 == 6
    indices = [p.row * 4 + p.column for p in path]
    for a, b in zip(indices, indices[1:]):
        assert graph.is_adjacent(a, b)


def test_path_never_longer_than_enumerated_paths():
    for matrix in (WALLED, RING_ROAD, OPEN_4):
        graph, start, end = build_graph(matrix)
        size = len(matrix)
        shortest = len(find_shortest_path(graph, size, start, end)) - 1
        # enumerated paths omit the end field, so edge count equals length
        for path in find_all_paths(graph, size, start, end):
            assert shortest <= len(path)


def test_repeated_calls_are_identical():
    first = _solve(OPEN_4)
    assert all(_solve(OPEN_4) == first for _ in range(3))


def test_mismatched_size_is_a_caller_error():
    graph, start, end = build_graph(WALLED)
    with pytest.raises(ValueError):
        find_shortest_path(graph, 4, start, end)
    with pytest.raises(ValueError):
        find_shortest_path(graph, 3, start, 99)


def test_ties_prefer_lower_estimate_then_first_discovered():
    # down is discovered before right, so the path hugs the left column
    path = _solve(OPEN_4)
    assert [p.as_tuple() for p in path] == [
        (3, 3), (3, 2), (3, 1), (3, 0), (2, 0), (1, 0), (0, 0)
    ]
