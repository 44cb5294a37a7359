from __future__ import annotations

import logging
import random

from psymaze.grid import Grid, ObstacleType, clamp_level


logger = logging.getLogger(__name__)

BASE_TRAP_DIVISOR = 18
MIN_TRAP_DIVISOR = 6
POWERUP_CELLS_PER_TILE = 60
POWERUP_ATTEMPT_FACTOR = 20

OBSTACLE_NAMES = {
    ObstacleType.NONE: " ",
    ObstacleType.TRAP: "Trap",
    ObstacleType.PUZZLE: "Puzzle",
    ObstacleType.BONUS: "Bonus",
    ObstacleType.POWERUP: "Power-up",
}

_ROLL_TO_OBSTACLE = {0: ObstacleType.TRAP, 1: ObstacleType.PUZZLE, 2: ObstacleType.BONUS}


def trap_divisor(level: int) -> int:
    # Higher level -> smaller divisor -> denser obstacles.
    return max(MIN_TRAP_DIVISOR, BASE_TRAP_DIVISOR - clamp_level(level) // 5)


def powerup_target(grid: Grid) -> int:
    return grid.rows * grid.cols // POWERUP_CELLS_PER_TILE


def place_obstacles(grid: Grid, level: int, rng: random.Random) -> int:
    """
    Classify every open cell except origin and exit, then scatter power-ups.

    Returns how many power-ups were actually placed; the target is soft and
    may be missed on crowded grids.
    """
    div = trap_divisor(level)
    for x in range(grid.rows):
        for y in range(grid.cols):
            if grid.open[x][y] and not grid.is_endpoint(x, y):
                grid.obstacles[x][y] = _ROLL_TO_OBSTACLE.get(rng.randrange(div), ObstacleType.NONE)
            else:
                grid.obstacles[x][y] = ObstacleType.NONE

    target = powerup_target(grid)
    placed = 0
    attempts = 0
    while placed < target and attempts < target * POWERUP_ATTEMPT_FACTOR:
        attempts += 1
        x = rng.randrange(grid.rows)
        y = rng.randrange(grid.cols)
        if grid.open[x][y] and grid.obstacles[x][y] == ObstacleType.NONE and not grid.is_endpoint(x, y):
            grid.obstacles[x][y] = ObstacleType.POWERUP
            placed += 1

    if placed < target:
        logger.debug("Placed %d of %d power-ups after %d draws", placed, target, attempts)
    return placed
