"""Coordinates value object.

Immutable integer grid point. Every operation returns a new value. Instances
are hashable and compare structurally, so they key sets and persistent maps
directly; the ``"x,y"`` string form is kept for serialization and is inverted
by :func:`parse_coordinates`.
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

from grid_pursuit.errors import InvalidDirectionError
from grid_pursuit.types import Direction


DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Order matters: it is the default exploration / tie-break order of searches.
ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))
DIAGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def _as_direction(direction: str) -> Direction:
    try:
        return Direction(direction)
    except ValueError:
        raise InvalidDirectionError(f"invalid direction: {direction!r}") from None


@dataclass(frozen=True)
class Coordinates:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def __str__(self) -> str:
        return self.key

    @property
    def key(self) -> str:
        """Canonical ``"x,y"`` identity string."""
        return f"{self.x},{self.y}"

    def neighbours(self, include_diagonals: bool = False) -> Tuple["Coordinates", ...]:
        """Return up, left, right, down, then (optionally) the four diagonals.

        No bounds checking is done; callers filter out-of-grid values.
        """
        offsets = ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS if include_diagonals else ORTHOGONAL_OFFSETS
        return tuple(Coordinates(self.x + dx, self.y + dy) for dx, dy in offsets)

    def difference(self, other: "Coordinates") -> "Coordinates":
        """Component-wise absolute difference."""
        return Coordinates(abs(self.x - other.x), abs(self.y - other.y))

    @property
    def magnitude(self) -> float:
        """Euclidean norm of the point treated as a vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def within_proximity(self, radius: float, other: "Coordinates") -> bool:
        return self.difference(other).magnitude <= radius

    def move(self, direction: str) -> "Coordinates":
        """Shift by one tile.

        Raises:
            InvalidDirectionError: If ``direction`` is not a ``Direction`` value.
        """
        dx, dy = DIRECTION_OFFSETS[_as_direction(direction)]
        return Coordinates(self.x + dx, self.y + dy)


def opposite(direction: str) -> Direction:
    """Return the direction that undoes ``direction``."""
    return OPPOSITE_DIRECTIONS[_as_direction(direction)]


@lru_cache(maxsize=4096)
def parse_coordinates(key: str) -> Coordinates:
    """Invert :attr:`Coordinates.key`; memoized per key string.

    Raises:
        ValueError: If ``key`` is not two comma separated integers.
    """
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"malformed coordinates key: {key!r}")
    return Coordinates(int(parts[0]), int(parts[1]))
