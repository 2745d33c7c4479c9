"""Entry point: ``python -m grid_pursuit``.

Headless solver: loads a built-in or generated maze level, runs the selected
algorithm from the agent to the destination and saves the rendered level with
the path highlighted.

    python -m grid_pursuit --level level-2 --algorithm "A*" --output a_star.png
    python -m grid_pursuit --maze 41x25 --seed 7 --diagonals
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence, Tuple

from grid_pursuit.actions import Action
from grid_pursuit.config import GameConfig, PathfindingConfig
from grid_pursuit.game import new_game
from grid_pursuit.levels.builtin import LEVEL_REGISTRY
from grid_pursuit.levels.level import Level
from grid_pursuit.levels.maze import generate_maze_level
from grid_pursuit.renderer import TileCanvas
from grid_pursuit.step import step
from grid_pursuit.types import PathfindingAlgorithm
from grid_pursuit.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _parse_size(value: str) -> Tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None
    return width, height


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid pathfinding solver")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--level", type=str, default="level-1", choices=sorted(LEVEL_REGISTRY))
    source.add_argument("--maze", type=_parse_size, metavar="WxH", help="Generate a maze level")
    parser.add_argument("--seed", type=int, default=None, help="Maze generation seed")
    parser.add_argument("--wall-percentage", type=float, default=1.0)
    parser.add_argument(
        "--algorithm",
        type=str,
        default=PathfindingAlgorithm.DIJKSTRA.value,
        choices=[algorithm.value for algorithm in PathfindingAlgorithm],
    )
    parser.add_argument("--diagonals", action="store_true", help="Allow diagonal steps")
    parser.add_argument("--cell-size", type=int, default=20)
    parser.add_argument("--output", type=str, default="path.png")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    return parser


def _select_level(args: argparse.Namespace) -> Level:
    if args.maze is not None:
        width, height = args.maze
        return generate_maze_level(
            width, height, rng=random.Random(args.seed), wall_percentage=args.wall_percentage
        )
    return LEVEL_REGISTRY[args.level]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level)

    level = _select_level(args)
    canvas = TileCanvas(level.width, level.height, args.cell_size, args.cell_size)
    config = GameConfig(
        pathfinding=PathfindingConfig(algorithm=args.algorithm, allow_diagonals=args.diagonals)
    )
    state = new_game([level], config, painter=canvas.draw_tile)
    state = step(state, Action.PATHFIND)

    canvas.to_image().save(args.output)
    if state.message:
        logger.warning(state.message)
    else:
        logger.info("path of %d cells saved to %s", len(state.path), args.output)
    return 0 if state.path else 1


if __name__ == "__main__":
    raise SystemExit(main())
