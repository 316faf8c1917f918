"""Service layer: limits, schema conversion and error mapping."""

import time

import pytest
from fastapi import HTTPException

from app.services import LabyrinthServices, RingsServices
from app.core.config import Settings, settings
from tests.grids import BLOCKED, OPEN_4, RING_ROAD, WALLED, open_grid


def test_shortest_path_response():
    response = LabyrinthServices().shortest_path(WALLED)
    assert response.length == 4
    assert [(p.x, p.y) for p in response.path] == [(2, 2), (2, 1), (2, 0), (1, 0), (0, 0)]


def test_no_path_maps_to_404():
    with pytest.raises(HTTPException) as exc:
        LabyrinthServices().shortest_path(BLOCKED)
    assert exc.value.status_code == 404


def test_malformed_grid_maps_to_422():
    with pytest.raises(HTTPException) as exc:
        LabyrinthServices().shortest_path([[2, 2], [0, 1]])
    assert exc.value.status_code == 422
    assert "start/end marker" in exc.value.detail


def test_escape_ways_response():
    response = LabyrinthServices().escape_ways(RING_ROAD)
    assert response.count == 2
    assert [(p.x, p.y) for p in response.paths[1]] == [(1, 2), (0, 2), (0, 1), (0, 0)]


def test_escape_ways_without_route_is_empty():
    response = LabyrinthServices().escape_ways(BLOCKED)
    assert response.count == 0
    assert response.paths == []


def test_grid_size_limits():
    with pytest.raises(HTTPException) as exc:
        LabyrinthServices(max_escape_grid_size=3).escape_ways(OPEN_4)
    assert exc.value.status_code == 422
    assert "size limit" in exc.value.detail
    assert LabyrinthServices(max_grid_size=4).shortest_path(OPEN_4).length == 6


def test_rings_response():
    response = RingsServices().solve(3)
    assert response.moves == 5
    assert response.states[-1] == [True, True, True]


@pytest.mark.parametrize("n", [0, 30])
def test_ring_count_rejected(n):
    with pytest.raises(HTTPException) as exc:
        RingsServices(max_ring_count=10).solve(n)
    assert exc.value.status_code == 422


def test_visualization_has_grid_and_path():
    figure = LabyrinthServices().visualize(WALLED)
    heatmap, path = figure["data"]
    assert heatmap["type"] == "heatmap"
    assert path["x"] == [2, 1, 0, 0, 0]
    assert path["y"] == [2, 2, 2, 1, 0]


def test_open_grid_at_escape_limit_answers_quickly():
    size = settings.MAX_ESCAPE_GRID_SIZE
    assert Settings.model_fields["MAX_ESCAPE_GRID_SIZE"].default == 5
    started = time.perf_counter()
    response = LabyrinthServices().escape_ways(open_grid(size))
    assert time.perf_counter() - started < 10
    # simple corner to corner paths on open grids
    assert response.count == {2: 2, 3: 12, 4: 184, 5: 8512}[size]


def test_open_grid_past_escape_limit_is_rejected():
    with pytest.raises(HTTPException) as exc:
        LabyrinthServices().escape_ways(open_grid(settings.MAX_ESCAPE_GRID_SIZE + 1))
    assert exc.value.status_code == 422


def test_explicit_zero_limit_is_not_replaced_by_default():
    with pytest.raises(HTTPException) as exc:
        RingsServices(max_ring_count=0).solve(1)
    assert exc.value.status_code == 422
    with pytest.raises(HTTPException):
        LabyrinthServices(max_grid_size=0).shortest_path(WALLED)
