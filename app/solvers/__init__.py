"""Grid path finding and ring puzzle solvers."""

from .grid_graph import build_graph, validate_matrix
from .astar import find_shortest_path
from .paths import find_all_paths
from .rings import can_toggle, minimal_move_count, solve_rings

__all__ = [
    "build_graph",
    "validate_matrix",
    "find_shortest_path",
    "find_all_paths",
    "can_toggle",
    "minimal_move_count",
    "solve_rings",
]
