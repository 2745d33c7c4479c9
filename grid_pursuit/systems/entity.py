"""Entity placement and movement system.

The three primitives here are the only way an area's occupancy map changes.
Each returns a new :class:`~grid_pursuit.area.Area` and notifies the area's
painter about every cell it touches.
"""

from dataclasses import replace
from typing import Tuple

from grid_pursuit.area import Area
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.errors import OccupancyConflictError
from grid_pursuit.types import EntityKind
from grid_pursuit.utils.grid import are_coordinates_valid, is_valid_agent_position


def add_entity(area: Area, xy: Coordinates, kind: EntityKind) -> Area:
    """Place ``kind`` at ``xy``.

    Adding ``EntityKind.EMPTY`` stores nothing but still paints the tile.

    Raises:
        IndexError: If ``xy`` is outside the area.
        OccupancyConflictError: If the cell already holds an entity.
    """
    kind = EntityKind(kind)
    if not are_coordinates_valid(area, xy):
        raise IndexError(f"Out of bounds: {xy} for area {area.width}x{area.height}")
    if xy in area.entities:
        raise OccupancyConflictError(
            f"cannot add {kind} at {xy}: cell already holds {area.entities[xy]}"
        )

    if kind != EntityKind.EMPTY:
        area = replace(area, entities=area.entities.set(xy, kind))
    area.painter(xy, kind)
    return area


def delete_entity(area: Area, xy: Coordinates) -> Area:
    """Clear ``xy``. Absent entities and out-of-bounds cells are a no-op."""
    if not are_coordinates_valid(area, xy):
        return area
    area = replace(area, entities=area.entities.discard(xy))
    area.painter(xy, EntityKind.EMPTY)
    return area


def move_entity(area: Area, xy: Coordinates, direction: str) -> Tuple[Area, Coordinates]:
    """Move the occupant of ``xy`` one tile in ``direction``.

    The move happens only if the target is a valid agent position. Whatever
    the target cell held is overwritten; overlap with other entities is
    resolved by the caller, which tracks entity positions itself.

    Returns:
        Tuple[Area, Coordinates]: The new area and the occupant's position
            (``xy`` unchanged if the move was refused).

    Raises:
        InvalidDirectionError: If ``direction`` is not recognized.
    """
    target = xy.move(direction)
    if not is_valid_agent_position(area, target):
        return area, xy

    kind = area.entities.get(xy, EntityKind.EMPTY)
    entities = area.entities.discard(xy)
    if kind != EntityKind.EMPTY:
        entities = entities.set(target, kind)
    else:
        kind = entities.get(target, EntityKind.EMPTY)
    area = replace(area, entities=entities)

    area.painter(xy, EntityKind.EMPTY)
    area.painter(target, kind)
    return area, target
