"""
Exceptions raised while reading a map.

All of them are raised by the grid parser before any graph work starts,
so a caller never sees a partially solved map.
"""


class MapError(ValueError):
    """Base class for malformed map input."""

    def __init__(self, message: str, marker: str = ""):
        super().__init__(message)
        self.marker = marker


class MissingStartError(MapError):
    """No cell carries the start marker."""

    def __init__(self, marker: str):
        super().__init__("No start point specified", marker=marker)


class MissingEndError(MapError):
    """No cell carries the end marker."""

    def __init__(self, marker: str):
        super().__init__("No end point specified", marker=marker)


class AmbiguousMarkerError(MapError):
    """More than one cell carries the start or end marker."""

    def __init__(self, marker: str, positions: list[tuple[int, int]]):
        shown = ", ".join(f"({row}, {col})" for row, col in positions[:3])
        if len(positions) > 3:
            shown += f" (+{len(positions) - 3} more)"
        super().__init__(
            f"Marker '{marker}' appears {len(positions)} times: {shown}",
            marker=marker,
        )
        self.positions = positions
