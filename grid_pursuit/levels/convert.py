from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from grid_pursuit.area import Area, no_paint
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.errors import LevelDecodeError
from grid_pursuit.levels.level import Level
from grid_pursuit.systems.entity import add_entity
from grid_pursuit.types import EntityKind, TilePainter


CHARACTER_TILES: Dict[str, EntityKind] = {
    "#": EntityKind.WALL,
    " ": EntityKind.EMPTY,
    "O": EntityKind.AGENT,
    "!": EntityKind.ENEMY,
    "X": EntityKind.DESTINATION,
}

TILE_CHARACTERS: Dict[EntityKind, str] = {
    kind: character for character, kind in CHARACTER_TILES.items()
}


def decode_character(character: str) -> EntityKind:
    """
    Map one layout character to its entity kind. Raises LevelDecodeError if unknown.
    """
    if character not in CHARACTER_TILES:
        raise LevelDecodeError(f"unknown character tile: {character!r}")
    return CHARACTER_TILES[character]


def add_entities_from_strings(area: Area, strings: Iterable[str]) -> Area:
    """
    Add one entity per character, row-major (row index = y, column index = x).
    Every row must match the first row's width.
    """
    width = None
    for y, row in enumerate(strings):
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise LevelDecodeError(
                f"row {y} has width {len(row)}, expected {width}"
            )
        for x, character in enumerate(row):
            area = add_entity(area, Coordinates(x, y), decode_character(character))
    return area


def to_area(level: Level, painter: TilePainter = no_paint) -> Area:
    """
    Build a fresh Area: decode the layout, then place the agent, the destination
    and every enemy (in that order) on top of it.
    """
    area = Area(width=level.width, height=level.height, painter=painter)
    area = add_entities_from_strings(area, level.layout)
    area = add_entity(area, level.agent, EntityKind.AGENT)
    area = add_entity(area, level.destination, EntityKind.DESTINATION)
    for enemy in level.enemies:
        area = add_entity(area, enemy, EntityKind.ENEMY)
    return area


def to_strings(area: Area) -> Tuple[str, ...]:
    """
    Encode an Area back into layout strings (inverse of add_entities_from_strings).
    Painted-only kinds never appear since they are not stored.
    """
    rows: List[str] = []
    for y in range(area.height):
        rows.append(
            "".join(
                TILE_CHARACTERS[area.entities.get(Coordinates(x, y), EntityKind.EMPTY)]
                for x in range(area.width)
            )
        )
    return tuple(rows)
