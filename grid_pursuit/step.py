"""State reducer.

:func:`step` is the only entry point for gameplay progression. It returns a
*new* :class:`grid_pursuit.game.GameState`; the input snapshot is untouched
(apart from tile notifications sent to the painter).

Ordering for a movement action:

1. Clear any highlighted path.
2. ``pursuit_system`` advances enemies near the agent. If one already shares
    the agent's cell the agent dies and the level restarts.
3. The agent moves one tile with ``move_entity`` (walls and edges refuse it).
4. Reaching the destination completes the level and loads the next one.

A pathfinding action clears the old highlight, searches agent to destination
with the configured algorithm and highlights the result.
"""

import logging
from dataclasses import replace

from grid_pursuit.actions import ACTION_DIRECTIONS, MOVE_ACTIONS, Action
from grid_pursuit.game import (
    OUTCOME_MESSAGES,
    GameState,
    GameStatus,
    Outcome,
    change_level,
    reset_level,
    unhighlight,
)
from grid_pursuit.pathfinding import find_path
from grid_pursuit.systems.entity import move_entity
from grid_pursuit.systems.path import highlight_path
from grid_pursuit.systems.pursuit import pursuit_system
from grid_pursuit.types import Direction

logger = logging.getLogger(__name__)


def step(state: GameState, action: Action) -> GameState:
    """Advance the game by one action.

    Args:
        state (GameState): Previous game state.
        action (Action): Action enum value (or its string value) to apply.

    Returns:
        GameState: Next state. ``outcome`` / ``message`` describe anything the
            front end should announce (death, level complete, no path).

    Raises:
        ValueError: If the action is not recognized.
    """
    try:
        action = Action(action)
    except ValueError:
        raise ValueError(f"Action is not valid: {action!r}") from None

    state = replace(state, outcome=None, message=None)
    state = unhighlight(state)

    if action in MOVE_ACTIONS:
        return _step_move(state, ACTION_DIRECTIONS[action])
    return _step_pathfind(state)


def _with_outcome(state: GameState, outcome: Outcome) -> GameState:
    return replace(state, outcome=outcome, message=OUTCOME_MESSAGES[outcome])


def _step_move(state: GameState, direction: Direction) -> GameState:
    """Pursuit tick followed by the agent's move."""
    result = pursuit_system(
        state.area,
        state.agent,
        state.enemies,
        radius=state.config.enemy_detection_proximity,
        allow_diagonals=state.config.pathfinding.allow_diagonals,
    )
    if result.caught:
        logger.info("agent died at %s on level %d", state.agent, state.level_index)
        return _with_outcome(reset_level(state), Outcome.DIED)

    area, agent = move_entity(result.area, state.agent, direction)
    state = replace(
        state,
        area=area,
        agent=agent,
        enemies=result.enemies,
        status=GameStatus.ENEMY_PURSUING if result.pursuing else GameStatus.NORMAL,
        turn=state.turn + 1,
    )

    if agent == state.destination:
        logger.info("level %d complete after %d turns", state.level_index, state.turn)
        return _with_outcome(change_level(state), Outcome.LEVEL_COMPLETE)
    return state


def _step_pathfind(state: GameState) -> GameState:
    """Search agent -> destination and highlight the result."""
    path = find_path(state.area, state.agent, state.destination, state.config.pathfinding)
    logger.info(
        "%s found %d cells from %s to %s",
        state.config.pathfinding.algorithm, len(path), state.agent, state.destination,
    )
    if not path:
        return _with_outcome(state, Outcome.NO_PATH)
    highlight_path(state.area, path)
    return replace(state, path=path)
