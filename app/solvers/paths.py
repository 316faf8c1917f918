"""Exhaustive enumeration of simple paths with depth-first search."""

from typing import List

from app.models import Graph, Point
from app.solvers.grid_graph import check_endpoints


def find_all_paths(graph: Graph, size: int, start: int, end: int) -> List[List[Point]]:
    """
    Enumerate every simple path from start to end.

    Each path is listed from the field just before the end back to the
    start; the end field itself is not part of it. Paths come out in
    depth-first order following the adjacency order (up, down, left, right).
    An unreachable end gives an empty list.
    """
    check_endpoints(graph, size, start, end)
    fields = graph.fields
    visited = [False] * len(fields)
    paths: List[List[Point]] = []

    # explicit stack of (field index, position of next neighbour to try)
    trail = [start]
    cursors = [0]
    visited[start] = True

    while trail:
        current = trail[-1]
        neighbours = graph.neighbours(current)
        cursor = cursors[-1]

        if cursor == len(neighbours):
            visited[current] = False
            trail.pop()
            cursors.pop()
            continue

        cursors[-1] = cursor + 1
        neighbour = neighbours[cursor]
        if visited[neighbour]:
            continue
        if neighbour == end:
            paths.append([fields[index].point for index in reversed(trail)])
            continue

        visited[neighbour] = True
        trail.append(neighbour)
        cursors.append(0)

    return paths
