"""
Pathfinding over text maps.

Ties parsing, adjacency, solving and rendering together:
- add_path() is the text-to-text entry point
- find_path() returns a PathResult with the route, its cost and the reason
  the search stopped
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Union

from .adjacency import build_adjacency
from .grid import Grid, parse_grid
from .models import DIAGONAL_COST, STRAIGHT_COST, Cell
from .render import render_path
from .solver import solve

logger = logging.getLogger(__name__)


class PathStopReason(Enum):
    """Reasons why pathfinding stopped."""
    SUCCESS = "success"
    NO_PATH_EXISTS = "no_path_exists"


@dataclass
class PathResult:
    """Result of a pathfinding operation."""
    start: Cell
    end: Cell
    path: list[Cell]
    reason: PathStopReason
    cost: int = 0
    message: str = ""
    grid: Optional[Grid] = field(default=None, repr=False)

    @property
    def success(self) -> bool:
        """Whether a route to the end cell was found."""
        return self.reason == PathStopReason.SUCCESS

    @property
    def marked_cells(self) -> list[Cell]:
        """Cells the renderer marks: the start followed by the path."""
        return [self.start, *self.path]

    def __bool__(self) -> bool:
        """Allow `if result:` to check for success."""
        return self.success

    def __iter__(self):
        """Allow `for cell in result:` to iterate path."""
        return iter(self.path)

    def __len__(self) -> int:
        """Return path length."""
        return len(self.path)

    def __repr__(self) -> str:
        if self.success:
            return f"PathResult(path=[{len(self.path)} steps], cost={self.cost}, reason=SUCCESS)"
        return f"PathResult(path=[], reason={self.reason.value}, message='{self.message}')"


def step_cost(from_cell: Cell, to_cell: Cell) -> int:
    """Cost of a single step between adjacent cells."""
    return DIAGONAL_COST if from_cell.is_diagonal_to(to_cell) else STRAIGHT_COST


def path_cost(start: Cell, path: Sequence[Cell]) -> int:
    """Sum of step costs walking a path that begins at start."""
    total = 0
    current = start
    for cell in path:
        total += step_cost(current, cell)
        current = cell
    return total


def find_path(source: Union[str, Sequence[str]]) -> PathResult:
    """
    Find the shortest path from the start marker to the end marker.

    Args:
        source: Map text, or its rows

    Returns:
        PathResult. An unreachable end is not an error: the result has an
        empty path and reason NO_PATH_EXISTS.

    Raises:
        MapError: If the map lacks exactly one start and one end marker
    """
    grid = parse_grid(source)
    adjacency = build_adjacency(grid)
    solved = solve(grid, adjacency, target=grid.end)

    path = solved.path_to(grid.end)
    if path is None:
        logger.info(f"find_path: no path from {grid.start.position} to {grid.end.position}")
        return PathResult(
            start=grid.start,
            end=grid.end,
            path=[],
            reason=PathStopReason.NO_PATH_EXISTS,
            message=f"No path from {grid.start.position} to {grid.end.position}",
            grid=grid,
        )

    cost = int(solved.distance_to(grid.end))
    logger.info(f"find_path: {len(path)} steps, cost {cost}")
    return PathResult(
        start=grid.start,
        end=grid.end,
        path=path,
        reason=PathStopReason.SUCCESS,
        cost=cost,
        grid=grid,
    )


def add_path(source: Union[str, Sequence[str]]) -> str:
    """
    Mark the shortest path on a map.

    The start cell and every cell on the shortest path to the end are
    overwritten with '*'. When the end cannot be reached only the start is
    marked.

    Raises:
        MapError: If the map lacks exactly one start and one end marker
    """
    result = find_path(source)
    return render_path(result.grid.lines, result.start, result.path)
