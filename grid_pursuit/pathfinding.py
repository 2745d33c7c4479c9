"""Built-in pathfinding functions.

Each *pathfinding function* maps (area, source, destination, allow_diagonals)
to a ``Path`` of cells between ``source`` and ``destination`` (both excluded), or
an empty tuple when no route exists under the current walls or the two are
adjacent. An empty result is a normal outcome, not an error.

Contract (``PathfindingFn``):

* Only cells for which ``is_valid_agent_position`` holds are traversed.
* The area is never mutated.
* Edges have unit weight; the grid is 4-connected, or 8-connected when
  diagonals are allowed.

Ordering: the depth-first searches return their navigated trail in entry order,
dead ends included, so consecutive cells need not be adjacent. Dijkstra (and
A*, built on it) return a route destination-to-source, so index 0 is
the cell adjacent to the destination. Pursuit relies on this.
"""

import heapq
import logging
import math
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Set, Tuple

from grid_pursuit.area import Area
from grid_pursuit.config import PathfindingConfig, select_algorithm
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.types import HeuristicFn, Path, PathfindingAlgorithm, PathfindingFn
from grid_pursuit.utils.grid import is_valid_agent_position, valid_positions

logger = logging.getLogger(__name__)

SortNeighboursFn = Callable[[Sequence[Coordinates]], Sequence[Coordinates]]


def zero_heuristic(neighbour: Coordinates) -> float:
    return 0.0


def _unvisited_neighbours(
    area: Area,
    xy: Coordinates,
    allow_diagonals: bool,
    visited: Set[Coordinates],
    sort_neighbours: Optional[SortNeighboursFn],
) -> Sequence[Coordinates]:
    neighbours = [
        neighbour
        for neighbour in xy.neighbours(allow_diagonals)
        if is_valid_agent_position(area, neighbour) and neighbour not in visited
    ]
    if sort_neighbours is not None:
        return sort_neighbours(neighbours)
    return neighbours


def find_depth_first_path(
    area: Area,
    source: Coordinates,
    destination: Coordinates,
    allow_diagonals: bool = False,
    visited: Optional[Set[Coordinates]] = None,
    sort_neighbours: Optional[SortNeighboursFn] = None,
) -> Path:
    """Backtracking depth-first search.

    The visited set only grows: a cell entered down one branch is never
    entered again down another, so the search is not shortest-path and can
    miss routes an earlier dead end cut through. Frames live on an explicit
    stack, so the depth is bounded by the number of valid cells rather than
    the interpreter's recursion limit.

    The result is the navigated trail: every cell entered, in entry order,
    including dead-end branches the search backed out of. It is therefore
    not a contiguous route. A destination next to the source gives ``()``.

    Args:
        area (Area): Area to search.
        source (Coordinates): Start cell.
        destination (Coordinates): Goal cell.
        allow_diagonals (bool): Expand diagonal neighbours too.
        visited (Set[Coordinates] | None): Shared visited set, mutated in place.
        sort_neighbours (SortNeighboursFn | None): Reorders each neighbour batch
            before it is explored; fixed neighbour order when ``None``.

    Returns:
        Path: Cells entered after ``source`` up to (excluding) ``destination``,
            or ``()`` if the destination was not reached.
    """
    if visited is None:
        visited = set()
    if source == destination:
        return ()
    if destination in source.neighbours(allow_diagonals) and is_valid_agent_position(
        area, destination
    ):
        return ()

    visited.add(source)
    trail: List[Coordinates] = [source]
    stack: List[Iterator[Coordinates]] = [
        iter(_unvisited_neighbours(area, source, allow_diagonals, visited, sort_neighbours))
    ]

    while stack:
        # Siblings can be visited by a deeper branch after the batch was built.
        step = next((xy for xy in stack[-1] if xy not in visited), None)
        if step is None:
            stack.pop()
            continue
        if step == destination:
            path = tuple(trail[1:])
            logger.debug(
                "depth-first %s -> %s: %d cells, %d visited",
                source, destination, len(path), len(visited),
            )
            return path

        visited.add(step)
        trail.append(step)
        stack.append(
            iter(_unvisited_neighbours(area, step, allow_diagonals, visited, sort_neighbours))
        )

    logger.debug("depth-first %s -> %s: no path", source, destination)
    return ()


def find_depth_first_path_directionally(
    area: Area,
    source: Coordinates,
    destination: Coordinates,
    allow_diagonals: bool = False,
    visited: Optional[Set[Coordinates]] = None,
) -> Path:
    """Depth-first search exploring neighbours nearest the destination first.

    Greedy ordering by Euclidean distance; ties keep neighbour order. Same
    irrevocable visited set as :func:`find_depth_first_path`.
    """

    def by_distance(neighbours: Sequence[Coordinates]) -> Sequence[Coordinates]:
        return sorted(neighbours, key=lambda xy: destination.difference(xy).magnitude)

    return find_depth_first_path(
        area, source, destination, allow_diagonals, visited, sort_neighbours=by_distance
    )


def find_dijkstra_path(
    area: Area,
    source: Coordinates,
    destination: Coordinates,
    allow_diagonals: bool = False,
    heuristic: HeuristicFn = zero_heuristic,
) -> Path:
    """Single-source shortest path with unit edge weights.

    Relaxing a neighbour costs ``distance(current) + 1 + heuristic(neighbour)``.
    The frontier is a binary heap with lazy deletion; equal distances are
    extracted in row-major order (``y`` then ``x``), with the source first.

    Returns:
        Path: Predecessor chain from the destination's predecessor back to
            (excluding) the source, i.e. destination-to-source order. Empty if
            the destination is unreachable, is the source, or is adjacent to it.
    """
    distances: Dict[Coordinates, float] = {source: 0.0}
    rank: Dict[Coordinates, int] = {source: -1}
    for index, xy in enumerate(valid_positions(area)):
        if xy != source:
            distances[xy] = math.inf
            rank[xy] = index

    previous: Dict[Coordinates, Coordinates] = {}
    visited: Set[Coordinates] = set()
    frontier: List[Tuple[float, int, Coordinates]] = [(0.0, rank[source], source)]

    while frontier:
        distance, _, current = heapq.heappop(frontier)
        if current in visited or distance > distances[current]:
            continue
        visited.add(current)

        if current == destination:
            path: List[Coordinates] = []
            step = previous.get(current)
            while step is not None and step in previous:
                path.append(step)
                step = previous[step]
            logger.debug(
                "dijkstra %s -> %s: %d cells, %d settled",
                source, destination, len(path), len(visited),
            )
            return tuple(path)

        for neighbour in current.neighbours(allow_diagonals):
            if neighbour not in distances or neighbour in visited:
                continue
            candidate = distance + 1 + heuristic(neighbour)
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                previous[neighbour] = current
                heapq.heappush(frontier, (candidate, rank[neighbour], neighbour))

    logger.debug("dijkstra %s -> %s: no path", source, destination)
    return ()


def find_a_star_path(
    area: Area,
    source: Coordinates,
    destination: Coordinates,
    allow_diagonals: bool = False,
) -> Path:
    """Dijkstra biased by Euclidean distance to the destination.

    The heuristic is added into the realized distance instead of being kept
    as a separate estimate, so results can differ from textbook A*.
    """
    return find_dijkstra_path(
        area,
        source,
        destination,
        allow_diagonals,
        heuristic=lambda neighbour: neighbour.difference(destination).magnitude,
    )


PATHFINDING_REGISTRY: Dict[PathfindingAlgorithm, PathfindingFn] = {
    PathfindingAlgorithm.RANDOM_DEPTH_FIRST: find_depth_first_path,
    PathfindingAlgorithm.DIRECTIONAL_DEPTH_FIRST: find_depth_first_path_directionally,
    PathfindingAlgorithm.DIJKSTRA: find_dijkstra_path,
    PathfindingAlgorithm.A_STAR: find_a_star_path,
}
"""Algorithm label to pathfinding function mapping."""


def find_path(
    area: Area,
    source: Coordinates,
    destination: Coordinates,
    config: PathfindingConfig,
) -> Path:
    """Run the algorithm selected in ``config``.

    Raises:
        InvalidSelectionError: If ``config.algorithm`` is not registered.
    """
    pathfinding_fn = PATHFINDING_REGISTRY[select_algorithm(config.algorithm)]
    return pathfinding_fn(area, source, destination, config.allow_diagonals)
