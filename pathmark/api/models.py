"""
Data models for map pathfinding.

These dataclasses represent the parsed map in a structured, type-safe
way: cells, the roles they play, and the weighted edges between them.
"""

from dataclasses import dataclass, field
from enum import Enum


# Map alphabet. Any other character is plain passable terrain.
START_CHAR = "S"
END_CHAR = "X"
WALL_CHAR = "B"
PATH_MARKER = "*"

# Step costs between adjacent cells
STRAIGHT_COST = 2
DIAGONAL_COST = 3


class CellRole(Enum):
    """Role a passable cell plays in the search."""

    NONE = "none"
    START = "start"
    END = "end"

    @classmethod
    def from_char(cls, char: str) -> "CellRole":
        """Derive the role from the map character."""
        if char == START_CHAR:
            return cls.START
        if char == END_CHAR:
            return cls.END
        return cls.NONE


@dataclass(frozen=True)
class Cell:
    """
    A passable position on the map.

    Equality and hashing use the position only, so a cell can be looked up
    by constructing one at the same coordinates.
    """

    row: int
    col: int
    char: str = field(default=".", compare=False)
    role: CellRole = field(default=CellRole.NONE, compare=False)
    # Row-major ordinal among passable cells, assigned by the parser
    index: int = field(default=-1, compare=False)

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def is_start(self) -> bool:
        return self.role == CellRole.START

    @property
    def is_end(self) -> bool:
        return self.role == CellRole.END

    def is_diagonal_to(self, other: "Cell") -> bool:
        """Check if another cell is a diagonal neighbor of this one."""
        return abs(self.row - other.row) == 1 and abs(self.col - other.col) == 1

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, {self.char!r})"


@dataclass(frozen=True)
class Edge:
    """Directed, weighted step from one cell to an adjacent one."""

    node: Cell
    cost: int
