"""Map parsing, shortest-path solving and path rendering."""

from .adjacency import NEIGHBOR_STEPS, build_adjacency, edges_from
from .grid import Grid, parse_grid
from .models import (
    DIAGONAL_COST,
    END_CHAR,
    PATH_MARKER,
    START_CHAR,
    STRAIGHT_COST,
    WALL_CHAR,
    Cell,
    CellRole,
    Edge,
)
from .pathfinding import (
    PathResult,
    PathStopReason,
    add_path,
    find_path,
    path_cost,
    step_cost,
)
from .render import render_path
from .solver import INFINITY, SolveResult, solve

__all__ = [
    # Entry points
    "add_path",
    "find_path",
    "PathResult",
    "PathStopReason",
    "path_cost",
    "step_cost",
    # Parsing
    "Grid",
    "parse_grid",
    # Graph
    "NEIGHBOR_STEPS",
    "build_adjacency",
    "edges_from",
    # Solving
    "INFINITY",
    "SolveResult",
    "solve",
    # Rendering
    "render_path",
    # Models
    "Cell",
    "CellRole",
    "Edge",
    "START_CHAR",
    "END_CHAR",
    "WALL_CHAR",
    "PATH_MARKER",
    "STRAIGHT_COST",
    "DIAGONAL_COST",
]
