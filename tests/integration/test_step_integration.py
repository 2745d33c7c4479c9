import pytest
from pyrsistent import pvector

from grid_pursuit.actions import KEY_BINDINGS, Action, select_editor_kind
from grid_pursuit.config import GameConfig, PathfindingConfig
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.errors import InvalidSelectionError
from grid_pursuit.game import (
    GameStatus,
    Outcome,
    change_level,
    edit_cell,
    new_game,
    reset_level,
    with_algorithm,
    with_diagonals,
)
from grid_pursuit.step import step
from grid_pursuit.types import EntityKind, PathfindingAlgorithm
from grid_pursuit.utils.grid import kind_at
from tests.test_utils import CORRIDOR, RecordingPainter, make_corridor_game, make_level


def test_walking_to_destination_completes_level() -> None:
    state = make_corridor_game()
    for _ in range(3):
        state = step(state, Action.RIGHT)
        assert state.outcome is None
    assert state.agent == Coordinates(4, 1)
    assert state.turn == 3

    state = step(state, Action.RIGHT)
    assert state.outcome == Outcome.LEVEL_COMPLETE
    assert state.message == "Level Complete"
    # Single level rotation wraps back to a fresh copy of itself.
    assert state.level_index == 0
    assert state.agent == Coordinates(1, 1)
    assert state.turn == 0


def test_level_complete_advances_to_next_level() -> None:
    second = make_level(CORRIDOR, agent=(5, 1), destination=(1, 1), name="reversed")
    state = make_corridor_game(extra_levels=[second])
    for _ in range(4):
        state = step(state, Action.RIGHT)
    assert state.level_index == 1
    assert state.level.name == "reversed"
    assert state.agent == Coordinates(5, 1)
    assert kind_at(state.area, Coordinates(1, 1)) == EntityKind.DESTINATION


def test_change_level_wraps_and_keeps_settings() -> None:
    config = GameConfig(pathfinding=PathfindingConfig(PathfindingAlgorithm.A_STAR, True))
    second = make_level(CORRIDOR, agent=(5, 1), destination=(1, 1))
    state = make_corridor_game(extra_levels=[second], config=config)
    state = change_level(state)
    assert state.level_index == 1
    state = change_level(state)
    assert state.level_index == 0
    assert state.config == config


def test_wall_refuses_move() -> None:
    state = make_corridor_game()
    next_state = step(state, Action.UP)
    assert next_state.agent == Coordinates(1, 1)
    assert next_state.area.entities == state.area.entities
    assert next_state.outcome is None


def test_step_leaves_previous_state_untouched() -> None:
    state = make_corridor_game()
    step(state, Action.RIGHT)
    assert state.agent == Coordinates(1, 1)
    assert kind_at(state.area, Coordinates(1, 1)) == EntityKind.AGENT
    assert state.turn == 0


def test_enemy_pursues_then_catches_agent() -> None:
    state = make_corridor_game(enemies=[(4, 1)])
    state = step(state, Action.RIGHT)
    # Enemy advanced (4,1) -> (3,1) before the agent reached (2,1).
    assert state.enemies == pvector([Coordinates(3, 1)])
    assert state.agent == Coordinates(2, 1)
    assert state.status == GameStatus.ENEMY_PURSUING

    # Adjacent now: the enemy waits and the agent walks into it.
    state = step(state, Action.RIGHT)
    assert state.agent == Coordinates(3, 1)
    assert state.enemies == pvector([Coordinates(3, 1)])
    assert state.outcome is None

    state = step(state, Action.LEFT)
    assert state.outcome == Outcome.DIED
    assert state.message == "You Died"
    assert state.agent == Coordinates(1, 1)
    assert state.enemies == pvector([Coordinates(4, 1)])
    assert state.turn == 0


def test_distant_enemy_leaves_status_normal() -> None:
    level = make_level(
        ("#" * 12, "#" + " " * 10 + "#", "#" * 12),
        agent=(1, 1),
        destination=(5, 1),
        enemies=[(10, 1)],
    )
    state = step(new_game([level]), Action.RIGHT)
    assert state.status == GameStatus.NORMAL
    assert state.enemies == pvector([Coordinates(10, 1)])


def test_pathfind_highlights_then_clears_on_next_step() -> None:
    painter = RecordingPainter()
    state = make_corridor_game(painter=painter)
    state = step(state, Action.PATHFIND)
    expected = (Coordinates(4, 1), Coordinates(3, 1), Coordinates(2, 1))
    assert state.path == expected
    assert state.outcome is None
    for xy in expected:
        assert painter.last_kind(xy) == EntityKind.NAVIGATED
        # Highlighting never touches the occupancy map.
        assert kind_at(state.area, xy) == EntityKind.EMPTY

    state = step(state, Action.UP)
    assert state.path == ()
    for xy in expected:
        assert painter.last_kind(xy) == EntityKind.EMPTY


@pytest.mark.parametrize("algorithm", list(PathfindingAlgorithm))
def test_pathfind_uses_selected_algorithm(algorithm: PathfindingAlgorithm) -> None:
    state = with_algorithm(make_corridor_game(), algorithm.value)
    state = step(state, Action.PATHFIND)
    assert set(state.path) == {Coordinates(2, 1), Coordinates(3, 1), Coordinates(4, 1)}


@pytest.mark.parametrize("algorithm", list(PathfindingAlgorithm))
@pytest.mark.parametrize("destination", [(2, 1), (1, 2)])
def test_pathfind_next_to_destination_finds_nothing(
    algorithm: PathfindingAlgorithm, destination: tuple[int, int]
) -> None:
    layout = ("#####", "#   #", "#   #", "#####")
    level = make_level(layout, agent=(1, 1), destination=destination)
    state = with_algorithm(new_game([level]), algorithm.value)
    state = step(state, Action.PATHFIND)
    assert state.outcome == Outcome.NO_PATH
    assert state.path == ()


def test_pathfind_reports_no_path() -> None:
    state = edit_cell(make_corridor_game(), Coordinates(3, 1), EntityKind.WALL)
    state = step(state, Action.PATHFIND)
    assert state.outcome == Outcome.NO_PATH
    assert state.message == "No path was found."
    assert state.path == ()

    # The announcement lasts one step only.
    state = step(state, Action.RIGHT)
    assert state.outcome is None


def test_settings_changes() -> None:
    state = with_algorithm(make_corridor_game(), "A*")
    assert state.config.pathfinding.algorithm == PathfindingAlgorithm.A_STAR
    state = with_diagonals(state, True)
    assert state.config.pathfinding.allow_diagonals
    assert state.config.pathfinding.algorithm == PathfindingAlgorithm.A_STAR
    with pytest.raises(InvalidSelectionError):
        with_algorithm(state, "Breadth-First")


def test_reset_level_restores_start() -> None:
    state = make_corridor_game(enemies=[(4, 1)])
    state = step(state, Action.RIGHT)
    state = reset_level(state)
    assert state.agent == Coordinates(1, 1)
    assert state.enemies == pvector([Coordinates(4, 1)])


def test_editor_moves_agent_and_destination() -> None:
    state = make_corridor_game()
    state = edit_cell(state, Coordinates(3, 1), EntityKind.AGENT)
    assert state.agent == Coordinates(3, 1)
    assert kind_at(state.area, Coordinates(1, 1)) == EntityKind.EMPTY
    assert kind_at(state.area, Coordinates(3, 1)) == EntityKind.AGENT

    state = edit_cell(state, Coordinates(2, 1), EntityKind.DESTINATION)
    assert state.destination == Coordinates(2, 1)
    assert kind_at(state.area, Coordinates(5, 1)) == EntityKind.EMPTY

    state = step(state, Action.LEFT)
    assert state.outcome == Outcome.LEVEL_COMPLETE


def test_editor_adds_and_removes_enemies() -> None:
    state = make_corridor_game()
    state = edit_cell(state, Coordinates(4, 1), EntityKind.ENEMY)
    assert state.enemies == pvector([Coordinates(4, 1)])
    assert kind_at(state.area, Coordinates(4, 1)) == EntityKind.ENEMY

    state = edit_cell(state, Coordinates(4, 1), EntityKind.EMPTY)
    assert state.enemies == pvector()
    assert Coordinates(4, 1) not in state.area.entities


def test_editor_rejects_navigated_and_out_of_bounds() -> None:
    state = make_corridor_game()
    with pytest.raises(ValueError):
        edit_cell(state, Coordinates(2, 1), EntityKind.NAVIGATED)
    with pytest.raises(IndexError):
        edit_cell(state, Coordinates(20, 1), EntityKind.WALL)


def test_invalid_action_raises() -> None:
    with pytest.raises(ValueError, match="Action is not valid"):
        step(make_corridor_game(), "jump")  # type: ignore[arg-type]


def test_string_actions_are_accepted() -> None:
    state = step(make_corridor_game(), "right")  # type: ignore[arg-type]
    assert state.agent == Coordinates(2, 1)


def test_key_bindings_drive_the_game() -> None:
    state = make_corridor_game()
    for key in "dddd":
        state = step(state, KEY_BINDINGS[key])
    assert state.outcome == Outcome.LEVEL_COMPLETE
    assert KEY_BINDINGS["p"] == Action.PATHFIND


def test_editor_labels() -> None:
    assert select_editor_kind("Agent (Move)") == EntityKind.AGENT
    assert select_editor_kind("Destination (Move)") == EntityKind.DESTINATION
    assert select_editor_kind("Wall") == EntityKind.WALL
    with pytest.raises(InvalidSelectionError):
        select_editor_kind("Navigated")
