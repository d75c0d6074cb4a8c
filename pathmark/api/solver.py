"""
Shortest-path solving.

Implements Dijkstra's algorithm from the start cell over the adjacency
built from the map. Working state lives in fixed-size tables indexed by
Cell.index and is discarded once the SolveResult is built.
"""

import heapq
import logging
import math
from dataclasses import dataclass
from typing import Optional

from .adjacency import build_adjacency
from .grid import Grid
from .models import Cell, Edge

logger = logging.getLogger(__name__)

# inf + any step cost is still inf, so unreached cells never compare smaller
INFINITY = math.inf

NO_PARENT = -1


@dataclass
class SolveResult:
    """Finalized distances and shortest-path tree from one solve."""

    grid: Grid
    distances: list[float]
    parents: list[int]

    def is_reachable(self, cell: Cell) -> bool:
        return self.distances[self._index(cell)] != INFINITY

    def distance_to(self, cell: Cell) -> float:
        """Cost of the shortest path to a cell, INFINITY if unreachable."""
        return self.distances[self._index(cell)]

    def path_to(self, cell: Cell) -> Optional[list[Cell]]:
        """
        Get the shortest path from the start to a cell.

        Returns:
            Cells from the start (exclusive) to the cell (inclusive). The
            start's own path is empty. None if the cell is unreachable.
        """
        index = self._index(cell)
        if self.distances[index] == INFINITY:
            return None

        path = []
        while self.parents[index] != NO_PARENT:
            path.append(self.grid.cells[index])
            index = self.parents[index]
        path.reverse()
        return path

    def paths(self) -> dict[Cell, list[Cell]]:
        """Shortest paths to every reachable cell."""
        return {
            cell: self.path_to(cell)
            for cell in self.grid.cells
            if self.is_reachable(cell)
        }

    def _index(self, cell: Cell) -> int:
        # Cells built by hand (index -1) are resolved through the grid
        if cell.index < 0:
            found = self.grid.cell_at(cell.row, cell.col)
            if found is None:
                raise KeyError(f"No passable cell at {cell.position}")
            return found.index
        return cell.index


def solve(
    grid: Grid,
    adjacency: Optional[dict[Cell, list[Edge]]] = None,
    target: Optional[Cell] = None,
) -> SolveResult:
    """
    Run Dijkstra from the grid's start cell.

    Uses a binary heap with lazy deletion: every improvement pushes a new
    entry and stale entries are skipped when popped. A running counter
    breaks distance ties in insertion order.

    Args:
        grid: Parsed map
        adjacency: Edge lists from build_adjacency (built if not given)
        target: Stop as soon as this cell is finalized. Results for the
            target are the same as for a full solve.

    Returns:
        SolveResult with the distance and parent tables
    """
    if adjacency is None:
        adjacency = build_adjacency(grid)

    size = len(grid.cells)
    distances: list[float] = [INFINITY] * size
    parents: list[int] = [NO_PARENT] * size
    finalized: list[bool] = [False] * size

    start = grid.start
    distances[start.index] = 0

    # Priority queue: (distance, counter, cell index)
    counter = 0
    queue: list[tuple[float, int, int]] = [(0, counter, start.index)]
    finalized_count = 0
    relaxed_count = 0

    while queue:
        distance, _, index = heapq.heappop(queue)
        if finalized[index] or distance > distances[index]:
            continue

        finalized[index] = True
        finalized_count += 1
        current = grid.cells[index]

        if target is not None and current == target:
            break

        for edge in adjacency[current]:
            neighbor = edge.node.index
            if finalized[neighbor]:
                continue

            candidate = distance + edge.cost
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                parents[neighbor] = index
                counter += 1
                heapq.heappush(queue, (candidate, counter, neighbor))
                relaxed_count += 1

    logger.debug(
        f"solve: finalized {finalized_count}/{size} cells, {relaxed_count} relaxations"
    )
    return SolveResult(grid=grid, distances=distances, parents=parents)
