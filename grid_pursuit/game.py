"""Game state and level lifecycle.

:class:`GameState` is the frozen snapshot a front end drives: the current
:class:`~grid_pursuit.area.Area`, the tracked agent / destination / enemy
positions, the level list and the live settings. Turn transitions live in
:mod:`grid_pursuit.step`; this module covers everything around them: loading,
resetting and advancing levels, the cell editor and settings changes.

Entity positions are tracked here rather than looked up in the area, because
the area only keeps one kind per cell and an agent standing on an enemy or on
the destination overwrites that cell's bookkeeping.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum, auto
from typing import Optional, Sequence, Tuple

from pyrsistent import PVector, pvector

from grid_pursuit.area import Area, no_paint
from grid_pursuit.config import GameConfig, select_algorithm
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.levels.convert import to_area
from grid_pursuit.levels.level import Level
from grid_pursuit.systems.entity import add_entity, delete_entity
from grid_pursuit.systems.path import clear_path
from grid_pursuit.types import EntityKind, Path, TilePainter

logger = logging.getLogger(__name__)


class GameStatus(StrEnum):
    NORMAL = auto()
    ENEMY_PURSUING = auto()


class Outcome(StrEnum):
    """Notable result of the last step, for the front end to announce."""

    DIED = auto()
    LEVEL_COMPLETE = auto()
    NO_PATH = auto()


OUTCOME_MESSAGES = {
    Outcome.DIED: "You Died",
    Outcome.LEVEL_COMPLETE: "Level Complete",
    Outcome.NO_PATH: "No path was found.",
}


@dataclass(frozen=True)
class GameState:
    """Immutable game snapshot.

    Attributes:
        area (Area): Current occupancy and bounds.
        agent (Coordinates): Agent position.
        destination (Coordinates): Destination position.
        enemies (PVector[Coordinates]): Enemy positions, in pursuit order.
        levels (Tuple[Level, ...]): Level rotation.
        level_index (int): Index of the level being played.
        config (GameConfig): Live settings; read by the next step.
        path (Path): Currently highlighted path, if any.
        status (GameStatus): Whether enemies advanced on the last move.
        outcome (Outcome | None): Notable result of the last step.
        message (str | None): Human readable form of ``outcome``.
        turn (int): Moves made on the current level.
    """

    area: Area
    agent: Coordinates
    destination: Coordinates
    enemies: PVector[Coordinates]
    levels: Tuple[Level, ...]
    level_index: int = 0
    config: GameConfig = field(default_factory=GameConfig)
    path: Path = ()
    status: GameStatus = GameStatus.NORMAL
    outcome: Optional[Outcome] = None
    message: Optional[str] = None
    turn: int = 0

    @property
    def level(self) -> Level:
        return self.levels[self.level_index]


def load_level(
    levels: Sequence[Level],
    level_index: int,
    config: Optional[GameConfig] = None,
    painter: TilePainter = no_paint,
) -> GameState:
    """Build a fresh state for ``levels[level_index]``.

    Raises:
        IndexError: If ``level_index`` is out of range.
        LevelDecodeError: If the layout cannot be decoded.
        OccupancyConflictError: If start positions overlap each other or walls.
    """
    levels = tuple(levels)
    level = levels[level_index]
    logger.info("loading level %d%s", level_index, f" ({level.name})" if level.name else "")
    return GameState(
        area=to_area(level, painter),
        agent=level.agent,
        destination=level.destination,
        enemies=pvector(level.enemies),
        levels=levels,
        level_index=level_index,
        config=config if config is not None else GameConfig(),
    )


def new_game(
    levels: Sequence[Level],
    config: Optional[GameConfig] = None,
    painter: TilePainter = no_paint,
) -> GameState:
    """Start at the first level."""
    return load_level(levels, 0, config, painter)


def reset_level(state: GameState) -> GameState:
    """Discard the area and rebuild the current level (settings are kept)."""
    return load_level(state.levels, state.level_index, state.config, state.area.painter)


def change_level(state: GameState) -> GameState:
    """Advance to the next level, wrapping to the first after the last."""
    next_index = (state.level_index + 1) % len(state.levels)
    return load_level(state.levels, next_index, state.config, state.area.painter)


def with_algorithm(state: GameState, label: str) -> GameState:
    """Select the pathfinding algorithm by label.

    Raises:
        InvalidSelectionError: If the label is unknown.
    """
    pathfinding = replace(state.config.pathfinding, algorithm=select_algorithm(label))
    return replace(state, config=replace(state.config, pathfinding=pathfinding))


def with_diagonals(state: GameState, allow_diagonals: bool) -> GameState:
    """Toggle diagonal steps for subsequent searches and pursuit."""
    pathfinding = replace(state.config.pathfinding, allow_diagonals=bool(allow_diagonals))
    return replace(state, config=replace(state.config, pathfinding=pathfinding))


def unhighlight(state: GameState) -> GameState:
    """Repaint the highlighted path cells with their real contents."""
    if not state.path:
        return state
    clear_path(state.area, state.path)
    return replace(state, path=())


def edit_cell(state: GameState, xy: Coordinates, kind: EntityKind) -> GameState:
    """Overwrite one cell from the level editor.

    The cell is cleared first. Placing the agent or the destination moves it:
    its previous cell is cleared. Placing an enemy adds to the pursuers. An
    enemy whose cell gets overwritten stops being tracked.

    Raises:
        IndexError: If ``xy`` is outside the area.
        ValueError: If ``kind`` is ``NAVIGATED`` (not placeable).
    """
    kind = EntityKind(kind)
    if kind == EntityKind.NAVIGATED:
        raise ValueError("navigated tiles cannot be placed")

    state = unhighlight(state)
    area = delete_entity(state.area, xy)
    agent, destination = state.agent, state.destination
    enemies = pvector(enemy for enemy in state.enemies if enemy != xy)

    if kind == EntityKind.DESTINATION:
        area = delete_entity(area, destination)
        destination = xy
    elif kind == EntityKind.AGENT:
        area = delete_entity(area, agent)
        agent = xy
    elif kind == EntityKind.ENEMY:
        enemies = enemies.append(xy)

    area = add_entity(area, xy, kind)
    return replace(
        state, area=area, agent=agent, destination=destination, enemies=enemies
    )
