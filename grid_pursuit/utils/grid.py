"""Occupancy queries.

Pure, read-only predicates over an :class:`~grid_pursuit.area.Area`. These are
the only way the pathfinding engine looks at the grid.
"""

from typing import Iterator

from grid_pursuit.area import Area
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.types import EntityKind


def are_coordinates_valid(area: Area, xy: Coordinates) -> bool:
    """Return True if ``xy`` lies within the area rectangle (occupancy ignored)."""
    return 0 <= xy.x < area.width and 0 <= xy.y < area.height


def is_valid_agent_position(area: Area, xy: Coordinates) -> bool:
    """Return True if ``xy`` is in bounds and not a wall.

    Agent, enemy and destination cells still count as valid: this predicate
    gates movement and traversal, not entity overlap.
    """
    return are_coordinates_valid(area, xy) and area.entities.get(xy) != EntityKind.WALL


def kind_at(area: Area, xy: Coordinates) -> EntityKind:
    """Return the stored kind at ``xy`` or ``EntityKind.EMPTY``."""
    return area.entities.get(xy, EntityKind.EMPTY)


def valid_positions(area: Area) -> Iterator[Coordinates]:
    """Yield every valid agent position in row-major order."""
    for y in range(area.height):
        for x in range(area.width):
            xy = Coordinates(x, y)
            if is_valid_agent_position(area, xy):
                yield xy
