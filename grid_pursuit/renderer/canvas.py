"""Tile canvas renderer.

``TileCanvas`` keeps an RGB pixel buffer (numpy) with one solid
``cell_width x cell_height`` block per grid cell. Its :meth:`TileCanvas.draw_tile`
has the :data:`~grid_pursuit.types.TilePainter` signature, so it can be handed
to an area as its painter and will mirror every add / delete / move and path
highlight. :func:`render_area` paints a whole area snapshot in one go.
"""

from typing import Dict, Mapping, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageColor

from grid_pursuit.area import Area
from grid_pursuit.config import DEFAULT_CELL_SIZE
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.errors import MissingResourceError
from grid_pursuit.types import EntityKind, Path

RGB = Tuple[int, int, int]
UInt8Array = npt.NDArray[np.uint8]

DEFAULT_COLORS: Dict[EntityKind, str] = {
    EntityKind.EMPTY: "black",
    EntityKind.WALL: "#ccc",
    EntityKind.AGENT: "blue",
    EntityKind.DESTINATION: "green",
    EntityKind.ENEMY: "red",
    EntityKind.NAVIGATED: "yellow",
}


class TileCanvas:
    """Solid-colour tile renderer backed by a numpy RGB buffer."""

    def __init__(
        self,
        width: int,
        height: int,
        cell_width: int = DEFAULT_CELL_SIZE,
        cell_height: int = DEFAULT_CELL_SIZE,
        colors: Optional[Mapping[EntityKind, str]] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.cell_width = cell_width
        self.cell_height = cell_height
        self._colors: Dict[EntityKind, RGB] = {
            EntityKind(kind): _to_rgb(name)
            for kind, name in {**DEFAULT_COLORS, **(colors or {})}.items()
        }
        self._pixels: UInt8Array = np.zeros(
            (height * cell_height, width * cell_width, 3), dtype=np.uint8
        )
        self.clear()

    def color(self, kind: EntityKind) -> RGB:
        """Return the RGB colour for ``kind``.

        Raises:
            MissingResourceError: If no colour is configured for ``kind``.
        """
        rgb = self._colors.get(kind)
        if rgb is None:
            raise MissingResourceError(f"tile type {kind!r} unknown")
        return rgb

    def draw_tile(self, xy: Coordinates, kind: EntityKind) -> None:
        """Fill the cell at ``xy``; cells outside the canvas are ignored."""
        if not (0 <= xy.x < self.width and 0 <= xy.y < self.height):
            return
        top = xy.y * self.cell_height
        left = xy.x * self.cell_width
        self._pixels[top : top + self.cell_height, left : left + self.cell_width] = self.color(kind)

    def clear(self) -> None:
        self._pixels[:, :] = self.color(EntityKind.EMPTY)

    def pixel_at(self, xy: Coordinates) -> RGB:
        """Colour currently painted on the cell at ``xy``."""
        r, g, b = self._pixels[xy.y * self.cell_height, xy.x * self.cell_width]
        return int(r), int(g), int(b)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._pixels.copy())


def _to_rgb(name: str) -> RGB:
    r, g, b = ImageColor.getrgb(name)[:3]
    return r, g, b


def render_area(
    area: Area,
    path: Path = (),
    cell_size: int = DEFAULT_CELL_SIZE,
    colors: Optional[Mapping[EntityKind, str]] = None,
) -> Image.Image:
    """Render an area snapshot, with ``path`` highlighted, to a Pillow image."""
    canvas = TileCanvas(area.width, area.height, cell_size, cell_size, colors)
    for xy, kind in area.entities.items():
        canvas.draw_tile(xy, kind)
    for xy in path:
        canvas.draw_tile(xy, EntityKind.NAVIGATED)
    return canvas.to_image()
