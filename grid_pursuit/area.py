"""Immutable ``Area`` dataclass.

The area is the whole traversal universe of a level: fixed dimensions plus a
sparse occupancy map from :class:`~grid_pursuit.coordinates.Coordinates` to
:class:`~grid_pursuit.types.EntityKind`.

Design notes:

* The occupancy map is a **persistent map** (``pyrsistent.PMap``). A cell
    missing from it is empty; ``EntityKind.EMPTY`` is never stored.
* Every mutation lives in :mod:`grid_pursuit.systems.entity` and returns a
    *new* ``Area`` via ``dataclasses.replace``. Searches only read through
    :mod:`grid_pursuit.utils.grid`.
* ``painter`` is the tile-paint notification hook. It is called on every
    add / delete / move so a renderer can mirror the map; it takes no part in
    equality.
"""

from dataclasses import dataclass, field
from typing import Any

from pyrsistent import PMap, pmap

from grid_pursuit.coordinates import Coordinates
from grid_pursuit.config import DEFAULT_AREA_HEIGHT, DEFAULT_AREA_WIDTH
from grid_pursuit.types import EntityKind, TilePainter


def no_paint(xy: Coordinates, kind: EntityKind) -> None:
    """Default painter: ignore tile notifications."""


@dataclass(frozen=True)
class Area:
    """Grid bounds and occupancy snapshot.

    Attributes:
        width (int): Grid width in tiles; valid ``x`` is ``[0, width)``.
        height (int): Grid height in tiles; valid ``y`` is ``[0, height)``.
        entities (PMap[Coordinates, EntityKind]): Occupied cells.
        painter (TilePainter): Tile-paint callback.
    """

    width: int = DEFAULT_AREA_WIDTH
    height: int = DEFAULT_AREA_HEIGHT
    entities: PMap[Coordinates, EntityKind] = pmap()
    painter: TilePainter = field(default=no_paint, compare=False, repr=False)

    @property
    def description(self) -> PMap[str, Any]:
        """Counts of stored entities per kind, for diagnostics."""
        counts: dict[str, int] = {}
        for kind in self.entities.values():
            counts[kind] = counts.get(kind, 0) + 1
        return pmap({"width": self.width, "height": self.height, **counts})
