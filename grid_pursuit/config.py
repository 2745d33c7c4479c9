"""Configuration dataclasses and defaults.

Pathfinding settings are explicit values handed to every search call rather
than mutable fields on the area, so the next call always sees the latest
selection.
"""

from dataclasses import dataclass, field

from grid_pursuit.errors import InvalidSelectionError
from grid_pursuit.types import PathfindingAlgorithm


DEFAULT_AREA_WIDTH = 30
DEFAULT_AREA_HEIGHT = 20
DEFAULT_CELL_SIZE = 20
ENEMY_DETECTION_PROXIMITY = 6


def select_algorithm(label: str) -> PathfindingAlgorithm:
    """Map a selection label (e.g. ``"A*"``) to its algorithm.

    Raises:
        InvalidSelectionError: If the label names no known algorithm.
    """
    try:
        return PathfindingAlgorithm(label)
    except ValueError:
        raise InvalidSelectionError(
            f"invalid pathfinding algorithm selected: {label!r}"
        ) from None


@dataclass(frozen=True)
class PathfindingConfig:
    """Search settings.

    Attributes:
        algorithm: Strategy used for pathfinding requests.
        allow_diagonals: Include the four diagonal neighbours when expanding.
    """

    algorithm: PathfindingAlgorithm = PathfindingAlgorithm.DIJKSTRA
    allow_diagonals: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", select_algorithm(self.algorithm))


@dataclass(frozen=True)
class GameConfig:
    """Game-wide settings.

    Attributes:
        pathfinding: Search settings for pathfinding requests and pursuit.
        enemy_detection_proximity: Euclidean radius within which enemies give chase.
    """

    pathfinding: PathfindingConfig = field(default_factory=PathfindingConfig)
    enemy_detection_proximity: float = ENEMY_DETECTION_PROXIMITY
