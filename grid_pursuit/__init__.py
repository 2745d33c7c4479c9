"""grid_pursuit
================

Pathfinding playground on a 2D grid of walls, an agent, a destination and
pursuing enemies. Four search strategies (randomized depth-first, directional
depth-first, Dijkstra, A*) run over an immutable :class:`~grid_pursuit.area.Area`;
enemies reuse Dijkstra to chase the agent one step per turn.

Typical use::

    from grid_pursuit.game import new_game
    from grid_pursuit.levels.builtin import LEVELS
    from grid_pursuit.step import step
    from grid_pursuit.actions import Action

    state = new_game(LEVELS)
    state = step(state, Action.PATHFIND)
"""
