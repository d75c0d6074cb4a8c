"""Shortest-path marking for text maps."""

from .api import PathResult, PathStopReason, add_path, find_path
from .exceptions import (
    AmbiguousMarkerError,
    MapError,
    MissingEndError,
    MissingStartError,
)

__all__ = [
    "add_path",
    "find_path",
    "PathResult",
    "PathStopReason",
    "MapError",
    "MissingStartError",
    "MissingEndError",
    "AmbiguousMarkerError",
]
