"""Rendering of a solved path back onto the map text."""

from typing import Iterable, Optional, Sequence, Union

from .grid import split_lines
from .models import PATH_MARKER, Cell


def render_path(
    source: Union[str, Sequence[str]],
    start: Cell,
    path: Optional[Iterable[Cell]],
    marker: str = PATH_MARKER,
) -> str:
    """
    Overlay the marker on the start cell and every cell of a path.

    Args:
        source: Original map text or its rows
        start: Start cell, always marked
        path: Cells from the start to the end; None or empty marks the
            start alone
        marker: Character written over marked cells

    Returns:
        The map text with the same line structure as the input
    """
    lines = split_lines(source) if isinstance(source, str) else list(source)
    rows = [list(line) for line in lines]

    rows[start.row][start.col] = marker
    for cell in path or ():
        rows[cell.row][cell.col] = marker

    return "\n".join("".join(row) for row in rows)
