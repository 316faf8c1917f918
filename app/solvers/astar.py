"""A* search over a grid graph with uniform edge cost."""

import heapq
import itertools
from typing import List, Sequence

from app.core.errors import NoPathFoundError
from app.models import Field, Graph, Point
from app.solvers.grid_graph import check_endpoints


def manhattan(a: Field, b: Field) -> int:
    return abs(a.row - b.row) + abs(a.column - b.column)


def find_shortest_path(graph: Graph, size: int, start: int, end: int) -> List[Point]:
    """
    Find one optimal path from start to end.

    The path is returned in backtracked order: it begins at the end point and
    follows predecessor links back to the start point (both included).
    Raises NoPathFoundError when the end cannot be reached.
    """
    check_endpoints(graph, size, start, end)
    fields = graph.fields
    goal = fields[end]

    count = len(fields)
    g_score = [None] * count
    came_from = [-1] * count
    closed = [False] * count

    # frontier entries: (f, h, discovery order, field index)
    order = itertools.count()
    h = manhattan(fields[start], goal)
    g_score[start] = 0
    frontier = [(h, h, next(order), start)]

    while frontier:
        _, _, _, current = heapq.heappop(frontier)
        if closed[current]:
            continue
        if current == end:
            return _backtrack(fields, came_from, start, end)
        closed[current] = True

        tentative = g_score[current] + 1
        for neighbour in graph.neighbours(current):
            if closed[neighbour]:
                continue
            if g_score[neighbour] is None or tentative < g_score[neighbour]:
                g_score[neighbour] = tentative
                came_from[neighbour] = current
                h = manhattan(fields[neighbour], goal)
                heapq.heappush(frontier, (tentative + h, h, next(order), neighbour))

    raise NoPathFoundError()


def _backtrack(fields: Sequence[Field], came_from: List[int], start: int, end: int) -> List[Point]:
    path = [fields[end].point]
    current = end
    while current != start:
        current = came_from[current]
        path.append(fields[current].point)
    return path
