"""Path highlighting.

Paths are visualization only: highlighting paints ``NAVIGATED`` over each
cell without touching the occupancy map, and clearing repaints each cell with
whatever the map says it holds.
"""

from typing import Iterable

from grid_pursuit.area import Area
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.types import EntityKind
from grid_pursuit.utils.grid import kind_at


def highlight_path(area: Area, path: Iterable[Coordinates]) -> None:
    for xy in path:
        area.painter(xy, EntityKind.NAVIGATED)


def clear_path(area: Area, path: Iterable[Coordinates]) -> None:
    for xy in path:
        area.painter(xy, kind_at(area, xy))
