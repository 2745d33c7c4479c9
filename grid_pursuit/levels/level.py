from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from grid_pursuit.coordinates import Coordinates


@dataclass(frozen=True)
class Level:
    """
    Authoring-time level description.
    - `layout[y][x]` is one layout character (see levels.convert.CHARACTER_TILES).
    - `agent`, `destination` and `enemies` are start positions placed on top of the layout.
    - Use levels.convert.to_area to build the Area a game runs on.
    """

    layout: Tuple[str, ...]
    agent: Coordinates
    destination: Coordinates
    enemies: Tuple[Coordinates, ...] = field(default_factory=tuple)
    name: Optional[str] = None

    @property
    def width(self) -> int:
        return len(self.layout[0]) if self.layout else 0

    @property
    def height(self) -> int:
        return len(self.layout)
