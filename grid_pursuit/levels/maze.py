"""Procedural maze levels.

Generates a walled perfect maze by randomized backtracking, optionally knocks
out a share of its interior walls, then places the agent in the top-left
corridor, the destination on the reachable cell farthest from it and the
enemies on open cells outside their detection radius. All randomness comes
from the supplied ``random.Random`` so a seed reproduces a level exactly.
"""

import random
from collections import deque
from typing import Dict, List, Optional, Tuple

from grid_pursuit.config import (
    DEFAULT_AREA_HEIGHT,
    DEFAULT_AREA_WIDTH,
    ENEMY_DETECTION_PROXIMITY,
)
from grid_pursuit.coordinates import Coordinates
from grid_pursuit.levels.level import Level

# Type aliases for clarity
Coord = Tuple[int, int]
MazeGrid = Dict[Coord, bool]  # True = open/floor; False = wall

DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def generate_perfect_maze(width: int, height: int, rng: random.Random) -> MazeGrid:
    """Carve a perfect maze inside a one-tile wall border.

    Corridors run on odd coordinates starting at (1, 1). Returns a dict mapping
    (x, y) -> bool (True is open/floor, False is wall).
    """
    if width < 3 or height < 3:
        raise ValueError(f"maze must be at least 3x3, got {width}x{height}")
    maze: MazeGrid = {(x, y): False for x in range(width) for y in range(height)}

    def in_interior(x: int, y: int) -> bool:
        return 1 <= x < width - 1 and 1 <= y < height - 1

    maze[(1, 1)] = True
    stack: List[Coord] = [(1, 1)]
    while stack:
        x, y = stack[-1]
        dirs = DIRECTIONS[:]
        rng.shuffle(dirs)
        for dx, dy in dirs:
            nx, ny = x + dx * 2, y + dy * 2
            if in_interior(nx, ny) and not maze[(nx, ny)]:
                maze[(x + dx, y + dy)] = True
                maze[(nx, ny)] = True
                stack.append((nx, ny))
                break
        else:
            stack.pop()

    return maze


def adjust_maze_wall_percentage(
    maze: MazeGrid, width: int, height: int, wall_percentage: float, rng: random.Random
) -> MazeGrid:
    """Returns a new MazeGrid keeping only ``wall_percentage`` of interior walls.

    wall_percentage=0.0: open room inside the border; 1.0: the perfect maze.
    """
    interior_walls: List[Coord] = [
        (x, y)
        for (x, y), is_open in maze.items()
        if not is_open and 0 < x < width - 1 and 0 < y < height - 1
    ]
    num_keep = int(len(interior_walls) * wall_percentage)
    shuffled = interior_walls[:]
    rng.shuffle(shuffled)
    removed = set(shuffled[num_keep:])
    return {pos: is_open or pos in removed for pos, is_open in maze.items()}


def bfs_distances(maze: MazeGrid, start: Coord) -> Dict[Coord, int]:
    """Step counts from ``start`` to every open cell reachable from it."""
    distances: Dict[Coord, int] = {start: 0}
    queue: deque[Coord] = deque([start])
    while queue:
        pos = queue.popleft()
        for dx, dy in DIRECTIONS:
            np = (pos[0] + dx, pos[1] + dy)
            if maze.get(np, False) and np not in distances:
                distances[np] = distances[pos] + 1
                queue.append(np)
    return distances


def generate_maze_level(
    width: int = DEFAULT_AREA_WIDTH,
    height: int = DEFAULT_AREA_HEIGHT,
    rng: Optional[random.Random] = None,
    wall_percentage: float = 1.0,
    num_enemies: int = 3,
) -> Level:
    """Build a playable maze level.

    The destination is always reachable from the agent. Fewer enemies than
    requested are placed when there are not enough open cells out of range.
    """
    rng = rng if rng is not None else random.Random()
    maze = generate_perfect_maze(width, height, rng)
    if wall_percentage < 1.0:
        maze = adjust_maze_wall_percentage(maze, width, height, wall_percentage, rng)

    agent = (1, 1)
    distances = bfs_distances(maze, agent)
    destination = max(distances, key=lambda pos: (distances[pos], pos[1], pos[0]))
    if destination == agent:
        raise ValueError(f"maze {width}x{height} has no room for a destination")

    agent_xy = Coordinates(*agent)
    candidates = [
        pos
        for pos in sorted(distances, key=lambda pos: (pos[1], pos[0]))
        if pos not in (agent, destination)
        and not agent_xy.within_proximity(ENEMY_DETECTION_PROXIMITY, Coordinates(*pos))
    ]
    enemies = rng.sample(candidates, min(num_enemies, len(candidates)))

    layout = tuple(
        "".join(" " if maze[(x, y)] else "#" for x in range(width))
        for y in range(height)
    )
    return Level(
        layout=layout,
        agent=agent_xy,
        destination=Coordinates(*destination),
        enemies=tuple(Coordinates(*pos) for pos in enemies),
        name=f"maze-{width}x{height}",
    )
