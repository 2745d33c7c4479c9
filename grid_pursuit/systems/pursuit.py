"""Enemy pursuit system.

Runs once per agent movement tick, before the agent moves. Every enemy within
the detection radius advances one cell along the shortest route between it
and the agent:

1. An enemy already standing on the agent's cell catches it; processing stops.
2. Otherwise, within range, Dijkstra runs from the agent *to* the enemy. Its
    first element is the cell next to the enemy on that route, which is one
    step closer to the agent because grid distance is symmetric.
3. The enemy moves there unless another enemy or the destination marker holds
    the cell, in which case it waits this tick.

An enemy next to the agent gets an empty route and holds position; it only
catches the agent once the agent steps onto it.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from pyrsistent import PVector, pvector

from grid_pursuit.area import Area
from grid_pursuit.config import ENEMY_DETECTION_PROXIMITY
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.pathfinding import find_dijkstra_path
from grid_pursuit.systems.entity import add_entity, delete_entity
from grid_pursuit.types import EntityKind
from grid_pursuit.utils.grid import kind_at

logger = logging.getLogger(__name__)

BLOCKING_KINDS = frozenset({EntityKind.ENEMY, EntityKind.DESTINATION})


@dataclass(frozen=True)
class PursuitResult:
    """Outcome of one pursuit tick.

    Attributes:
        area (Area): Area after enemy relocations.
        enemies (PVector[Coordinates]): Enemy positions, in input order.
        caught (bool): An enemy shares the agent's cell.
        pursuing (bool): At least one enemy advanced this tick.
    """

    area: Area
    enemies: PVector[Coordinates]
    caught: bool = False
    pursuing: bool = False


def pursuit_system(
    area: Area,
    agent: Coordinates,
    enemies: Iterable[Coordinates],
    radius: float = ENEMY_DETECTION_PROXIMITY,
    allow_diagonals: bool = False,
) -> PursuitResult:
    """Advance every enemy within ``radius`` of ``agent`` by one cell.

    Args:
        area (Area): Current area.
        agent (Coordinates): Agent position.
        enemies (Iterable[Coordinates]): Enemy positions, processed in order.
        radius (float): Euclidean detection radius (inclusive).
        allow_diagonals (bool): Let the chase route use diagonal steps.

    Returns:
        PursuitResult: Updated area and enemy positions. When ``caught`` is set
            the enemies after the catching one have not been processed.
    """
    positions: PVector[Coordinates] = pvector(enemies)
    pursuing = False

    for index, enemy in enumerate(positions):
        if enemy == agent:
            logger.info("enemy at %s caught the agent", enemy)
            return PursuitResult(area, positions, caught=True, pursuing=pursuing)
        if not agent.within_proximity(radius, enemy):
            continue

        route = find_dijkstra_path(area, agent, enemy, allow_diagonals)
        if not route:
            continue
        next_xy = route[0]
        if kind_at(area, next_xy) in BLOCKING_KINDS:
            logger.debug("enemy at %s blocked by %s", enemy, kind_at(area, next_xy))
            continue

        area = delete_entity(area, enemy)
        area = add_entity(area, next_xy, EntityKind.ENEMY)
        positions = positions.set(index, next_xy)
        pursuing = True
        logger.debug("enemy %s -> %s", enemy, next_xy)

    return PursuitResult(area, positions, caught=False, pursuing=pursuing)
