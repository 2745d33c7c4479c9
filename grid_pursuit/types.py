"""Common type aliases and enumerations.

``TilePainter`` and ``PathfindingFn`` are the two extension points: the first
lets any renderer observe cell changes, the second lets new search strategies
be registered next to the built-in ones.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from grid_pursuit.area import Area
    from grid_pursuit.coordinates import Coordinates


class EntityKind(StrEnum):
    """Semantic occupant of a cell.

    ``EMPTY`` is never stored in an area; absence from the map means empty.
    ``NAVIGATED`` is only ever painted, to highlight a found path.
    """

    EMPTY = auto()
    WALL = auto()
    AGENT = auto()
    DESTINATION = auto()
    ENEMY = auto()
    NAVIGATED = auto()


class Direction(StrEnum):
    """Screen-space movement directions (``UP`` decreases ``y``)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class PathfindingAlgorithm(StrEnum):
    """Selectable search strategies, valued by their display labels."""

    RANDOM_DEPTH_FIRST = "Random Depth-First"
    DIRECTIONAL_DEPTH_FIRST = "Directional Depth-First"
    DIJKSTRA = "Djikstra's Algorithm"
    A_STAR = "A*"


TilePainter = Callable[["Coordinates", EntityKind], None]
Path = Tuple["Coordinates", ...]
HeuristicFn = Callable[["Coordinates"], float]
PathfindingFn = Callable[["Area", "Coordinates", "Coordinates", bool], Path]
