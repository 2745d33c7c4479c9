import random

import pytest

from grid_pursuit.area import Area
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.errors import LevelDecodeError, OccupancyConflictError
from grid_pursuit.levels.builtin import LEVEL_REGISTRY, LEVELS
from grid_pursuit.levels.convert import (
    add_entities_from_strings,
    decode_character,
    to_area,
    to_strings,
)
from grid_pursuit.levels.maze import generate_maze_level, generate_perfect_maze
from grid_pursuit.pathfinding import find_dijkstra_path
from grid_pursuit.types import EntityKind
from grid_pursuit.utils.grid import is_valid_agent_position
from tests.test_utils import RecordingPainter, make_level


@pytest.mark.parametrize(
    "character, kind",
    [
        ("#", EntityKind.WALL),
        (" ", EntityKind.EMPTY),
        ("O", EntityKind.AGENT),
        ("!", EntityKind.ENEMY),
        ("X", EntityKind.DESTINATION),
    ],
)
def test_decode_character(character: str, kind: EntityKind) -> None:
    assert decode_character(character) == kind


@pytest.mark.parametrize("character", ["?", ".", "x", "##"])
def test_decode_rejects_unknown_characters(character: str) -> None:
    with pytest.raises(LevelDecodeError):
        decode_character(character)


def test_layout_is_decoded_row_major() -> None:
    painter = RecordingPainter()
    area = add_entities_from_strings(Area(width=3, height=2, painter=painter), ["#O ", "!X#"])
    assert area.entities[Coordinates(0, 0)] == EntityKind.WALL
    assert area.entities[Coordinates(1, 0)] == EntityKind.AGENT
    assert area.entities[Coordinates(0, 1)] == EntityKind.ENEMY
    assert area.entities[Coordinates(1, 1)] == EntityKind.DESTINATION
    assert Coordinates(2, 0) not in area.entities
    # One paint per character
    assert [xy for xy, _ in painter.calls] == [
        Coordinates(x, y) for y in range(2) for x in range(3)
    ]


def test_layout_with_unknown_character_fails() -> None:
    with pytest.raises(LevelDecodeError):
        add_entities_from_strings(Area(width=3, height=1), ["#?#"])


def test_ragged_layout_fails() -> None:
    with pytest.raises(LevelDecodeError):
        add_entities_from_strings(Area(width=3, height=2), ["###", "##"])


def test_to_area_places_start_entities() -> None:
    level = make_level(("#   #",), agent=(1, 0), destination=(3, 0), enemies=[(2, 0)])
    area = to_area(level)
    assert (area.width, area.height) == (5, 1)
    assert to_strings(area) == ("#O!X#",)


def test_to_area_rejects_start_on_wall() -> None:
    level = make_level(("# ",), agent=(0, 0), destination=(1, 0))
    with pytest.raises(OccupancyConflictError):
        to_area(level)


def test_builtin_levels_shape() -> None:
    assert len(LEVELS) == 4
    assert set(LEVEL_REGISTRY) == {"level-1", "level-2", "level-3", "level-4"}
    for level in LEVELS:
        assert (level.width, level.height) == (30, 20)
        area = to_area(level)
        assert area.entities[level.agent] == EntityKind.AGENT
        assert area.entities[level.destination] == EntityKind.DESTINATION
        for enemy in level.enemies:
            assert area.entities[enemy] == EntityKind.ENEMY


def test_perfect_maze_keeps_border_walls() -> None:
    maze = generate_perfect_maze(11, 9, random.Random(0))
    for x in range(11):
        assert not maze[(x, 0)] and not maze[(x, 8)]
    for y in range(9):
        assert not maze[(0, y)] and not maze[(10, y)]
    assert maze[(1, 1)]


def test_maze_level_is_playable() -> None:
    level = generate_maze_level(21, 15, rng=random.Random(7), num_enemies=4)
    area = to_area(level)
    assert (area.width, area.height) == (21, 15)
    assert find_dijkstra_path(area, level.agent, level.destination)
    assert len(level.enemies) == 4
    for enemy in level.enemies:
        assert is_valid_agent_position(area, enemy)
        assert not level.agent.within_proximity(6, enemy)


def test_maze_level_is_deterministic_per_seed() -> None:
    first = generate_maze_level(15, 11, rng=random.Random(42))
    second = generate_maze_level(15, 11, rng=random.Random(42))
    assert first == second


def test_open_maze_has_fewer_walls() -> None:
    walled = generate_maze_level(21, 15, rng=random.Random(1), wall_percentage=1.0)
    opened = generate_maze_level(21, 15, rng=random.Random(1), wall_percentage=0.0)

    def wall_count(layout: tuple[str, ...]) -> int:
        return sum(row.count("#") for row in layout)

    assert wall_count(opened.layout) < wall_count(walled.layout)
    # Only the border remains
    assert wall_count(opened.layout) == 2 * 21 + 2 * (15 - 2)


def test_maze_too_small_is_rejected() -> None:
    with pytest.raises(ValueError):
        generate_maze_level(3, 3, rng=random.Random(0))
