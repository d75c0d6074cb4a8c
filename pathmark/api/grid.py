"""
Map parsing.

Turns the raw map text into the set of passable cells and locates the
unique start and end cells. Walls never become cells, so everything
downstream only ever sees walkable terrain.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from pathmark.exceptions import (
    AmbiguousMarkerError,
    MissingEndError,
    MissingStartError,
)

from .models import END_CHAR, START_CHAR, WALL_CHAR, Cell, CellRole

logger = logging.getLogger(__name__)


@dataclass
class Grid:
    """Parsed map: source rows plus the passable cells found in them."""

    lines: list[str]
    cells: list[Cell]
    start: Cell
    end: Cell
    _by_position: dict[tuple[int, int], Cell] = field(default_factory=dict, repr=False)

    def __post_init__(self):
        if not self._by_position:
            self._by_position = {cell.position: cell for cell in self.cells}

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        """Length of the longest row, not counting a CRLF carriage return."""
        return max((len(row_body(line)) for line in self.lines), default=0)

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        """
        Get the passable cell at a position.

        Returns None for walls and for positions outside the map, including
        columns past the end of a short row.
        """
        return self._by_position.get((row, col))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)


def split_lines(text: str) -> list[str]:
    """Split map text on newlines, keeping empty trailing rows."""
    return text.split("\n")


def row_body(line: str) -> str:
    """Row text without the carriage return left over from CRLF line endings."""
    return line[:-1] if line.endswith("\r") else line


def parse_grid(source: Union[str, Sequence[str]]) -> Grid:
    """
    Parse a map into a Grid.

    Args:
        source: The map as one newline-separated string, or as a sequence
            of row strings.

    Returns:
        Grid holding every non-wall cell in row-major order

    Raises:
        MissingStartError: If no cell is marked as the start
        MissingEndError: If no cell is marked as the end
        AmbiguousMarkerError: If the start or end marker appears more than once
    """
    lines = split_lines(source) if isinstance(source, str) else list(source)

    cells: list[Cell] = []
    starts: list[Cell] = []
    ends: list[Cell] = []

    for row, line in enumerate(lines):
        for col, char in enumerate(row_body(line)):
            if char == WALL_CHAR:
                continue
            cell = Cell(row, col, char, CellRole.from_char(char), index=len(cells))
            cells.append(cell)
            if cell.is_start:
                starts.append(cell)
            elif cell.is_end:
                ends.append(cell)

    start = _single(starts, START_CHAR)
    end = _single(ends, END_CHAR)

    grid = Grid(lines=lines, cells=cells, start=start, end=end)
    logger.debug(
        f"parse_grid: {grid.height}x{grid.width} map, {len(cells)} passable cells, "
        f"start={start.position}, end={end.position}"
    )
    return grid


def _single(found: list[Cell], marker: str) -> Cell:
    """Return the only cell carrying a marker or raise the matching error."""
    if not found:
        if marker == START_CHAR:
            raise MissingStartError(marker)
        raise MissingEndError(marker)
    if len(found) > 1:
        raise AmbiguousMarkerError(marker, [cell.position for cell in found])
    return found[0]
