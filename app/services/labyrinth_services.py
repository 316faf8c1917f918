import json
import logging
from typing import List, Optional

from fastapi import HTTPException

from app.core.config import settings
from app.core.errors import GridErrorKind, MalformedGridError, NoPathFoundError
from app.models import Point
from app.schemas import EscapeWaysResponse, LabyrinthResponse, PointRead
from app.solvers import build_graph, find_all_paths, find_shortest_path
from app.visualization import generate_labyrinth_visualization

logger = logging.getLogger(__name__)


class LabyrinthServices:
    """ Handles all grid related requests"""

    def __init__(self, max_grid_size: Optional[int] = None, max_escape_grid_size: Optional[int] = None):
        self.max_grid_size = settings.MAX_GRID_SIZE if max_grid_size is None else max_grid_size
        self.max_escape_grid_size = (
            settings.MAX_ESCAPE_GRID_SIZE if max_escape_grid_size is None else max_escape_grid_size
        )

    # shortest path
    def shortest_path(self, matrix: List[List[int]]) -> LabyrinthResponse:
        """Solve with A*, path is listed from end to start"""
        path = self._shortest_path(matrix)
        logger.info("Shortest path found: %d steps", len(path) - 1)
        return LabyrinthResponse(
            length=len(path) - 1,
            path=[PointRead.from_point(p) for p in path],
        )

    # all simple paths
    def escape_ways(self, matrix: List[List[int]]) -> EscapeWaysResponse:
        """Enumerate every simple path, each without the end field"""
        graph, start, end = self._build(matrix, self.max_escape_grid_size)
        paths = find_all_paths(graph, len(matrix), start, end)
        logger.info("Escape ways found: %d", len(paths))
        return EscapeWaysResponse(
            count=len(paths),
            paths=[[PointRead.from_point(p) for p in path] for path in paths],
        )

    # plotly figure
    def visualize(self, matrix: List[List[int]]) -> dict:
        """Serialize the grid and its shortest path as a Plotly figure"""
        path = self._shortest_path(matrix)
        fig = generate_labyrinth_visualization(matrix, path)
        return json.loads(fig.to_json())

    def _shortest_path(self, matrix: List[List[int]]) -> List[Point]:
        graph, start, end = self._build(matrix, self.max_grid_size)
        try:
            return find_shortest_path(graph, len(matrix), start, end)
        except NoPathFoundError as e:
            logger.info("No path between start and end")
            raise HTTPException(status_code=404, detail=str(e))

    def _build(self, matrix: List[List[int]], limit: int):
        try:
            if len(matrix) > limit:
                raise MalformedGridError(
                    GridErrorKind.TOO_LARGE, f"size {len(matrix)}, limit {limit}"
                )
            return build_graph(matrix)
        except MalformedGridError as e:
            logger.warning("Rejected matrix: %s", e)
            raise HTTPException(status_code=422, detail=str(e))
