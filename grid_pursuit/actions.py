"""Action enumerations and input bindings.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import StrEnum, auto
from typing import Dict

from grid_pursuit.errors import InvalidSelectionError
from grid_pursuit.types import Direction, EntityKind


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions (enemies pursue first).
        PATHFIND: Search agent -> destination with the selected algorithm.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PATHFIND = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}

KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "p": Action.PATHFIND,
}
"""Keyboard key to action mapping; unbound keys are ignored by front ends."""

EDITOR_ENTITY_LABELS: Dict[str, EntityKind] = {
    "Wall": EntityKind.WALL,
    "Empty": EntityKind.EMPTY,
    "Enemy": EntityKind.ENEMY,
    "Destination (Move)": EntityKind.DESTINATION,
    "Agent (Move)": EntityKind.AGENT,
}


def select_editor_kind(label: str) -> EntityKind:
    """Map an editor dropdown label to the entity kind it places.

    Raises:
        InvalidSelectionError: If the label is unknown.
    """
    if label not in EDITOR_ENTITY_LABELS:
        raise InvalidSelectionError(f"invalid entity selected: {label!r}")
    return EDITOR_ENTITY_LABELS[label]
