"""
Adjacency building.

Derives the weighted edges leaving every passable cell. Each cell looks at
its own eight neighbors; nothing is inferred from symmetry.
"""

import logging

from .grid import Grid
from .models import DIAGONAL_COST, STRAIGHT_COST, Cell, Edge

logger = logging.getLogger(__name__)


# (row delta, col delta, cost), in the order edges are emitted:
# top, top-left, top-right, bottom, bottom-left, bottom-right, left, right
NEIGHBOR_STEPS: list[tuple[int, int, int]] = [
    (-1, 0, STRAIGHT_COST),
    (-1, -1, DIAGONAL_COST),
    (-1, 1, DIAGONAL_COST),
    (1, 0, STRAIGHT_COST),
    (1, -1, DIAGONAL_COST),
    (1, 1, DIAGONAL_COST),
    (0, -1, STRAIGHT_COST),
    (0, 1, STRAIGHT_COST),
]


def edges_from(grid: Grid, cell: Cell) -> list[Edge]:
    """
    Get the outgoing edges of a single cell.

    A neighbor position yields an edge only when a passable cell exists
    there; walls, rows outside the map and columns past a short row's end
    are all skipped.
    """
    edges = []
    for d_row, d_col, cost in NEIGHBOR_STEPS:
        neighbor = grid.cell_at(cell.row + d_row, cell.col + d_col)
        if neighbor is not None:
            edges.append(Edge(neighbor, cost))
    return edges


def build_adjacency(grid: Grid) -> dict[Cell, list[Edge]]:
    """
    Build the edge lists for every passable cell.

    Args:
        grid: Parsed map

    Returns:
        Mapping from each cell to its ordered outgoing edges. Isolated
        cells map to an empty list.
    """
    adjacency = {cell: edges_from(grid, cell) for cell in grid.cells}

    edge_count = sum(len(edges) for edges in adjacency.values())
    logger.debug(f"build_adjacency: {len(adjacency)} cells, {edge_count} edges")
    return adjacency
