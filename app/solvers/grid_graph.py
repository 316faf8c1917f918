"""Turn a square matrix of cell markers into a graph of fields."""

from typing import List, Sequence, Tuple

from app.core.errors import GridErrorKind, MalformedGridError
from app.models import CellValue, Field, Graph

# neighbour visit order: up, down, left, right
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def validate_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Check shape, cell values and markers. Returns the matrix size N."""
    size = len(matrix) if matrix is not None else 0
    if size == 0:
        raise MalformedGridError(GridErrorKind.SHAPE, "matrix has no rows")
    for row_index, row in enumerate(matrix):
        if len(row) != size:
            raise MalformedGridError(
                GridErrorKind.SHAPE,
                f"row {row_index} has {len(row)} cells, expected {size}",
            )

    starts = ends = 0
    for row_index, row in enumerate(matrix):
        for column_index, value in enumerate(row):
            if value not in CellValue.ALL:
                raise MalformedGridError(
                    GridErrorKind.CELL_VALUE,
                    f"{value!r} at ({row_index}, {column_index})",
                )
            if value == CellValue.START:
                starts += 1
            elif value == CellValue.END:
                ends += 1

    if starts != 1 or ends != 1:
        raise MalformedGridError(
            GridErrorKind.MARKERS, f"found {starts} start and {ends} end markers"
        )
    return size


def build_graph(matrix: Sequence[Sequence[int]]) -> Tuple[Graph, int, int]:
    """
    Build the field set and 4-directional adjacency for a square matrix.
    Returns (graph, start_index, end_index). Blocked fields get no edges.
    """
    size = validate_matrix(matrix)

    fields: List[Field] = []
    start_index = end_index = -1
    for row_index, row in enumerate(matrix):
        for column_index, value in enumerate(row):
            index = row_index * size + column_index
            fields.append(Field(row_index, column_index, value != CellValue.WALL, index))
            if value == CellValue.START:
                start_index = index
            elif value == CellValue.END:
                end_index = index

    adjacency: List[Tuple[int, ...]] = []
    for current in fields:
        neighbours: List[int] = []
        if current.passable:
            for d_row, d_column in DIRECTIONS:
                row, column = current.row + d_row, current.column + d_column
                if 0 <= row < size and 0 <= column < size:
                    neighbour = fields[row * size + column]
                    if neighbour.passable:
                        neighbours.append(neighbour.index)
        adjacency.append(tuple(neighbours))

    return Graph(fields=tuple(fields), adjacency=tuple(adjacency)), start_index, end_index


def check_endpoints(graph: Graph, size: int, start: int, end: int) -> None:
    """Guard shared by the path finders against mismatched arguments."""
    if size * size != len(graph.fields):
        raise ValueError(f"graph has {len(graph.fields)} fields, expected {size * size}")
    for name, index in (("start", start), ("end", end)):
        if not 0 <= index < len(graph.fields):
            raise ValueError(f"{name} index {index} out of range")
