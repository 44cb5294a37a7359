from __future__ import annotations

import logging
import random

from psymaze.grid import Direction, Grid


logger = logging.getLogger(__name__)

# Shuffle order of the carving directions (up, down, left, right).
CARVE_DIRECTIONS: tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def shuffle_directions(rng: random.Random) -> list[Direction]:
    """Fisher-Yates shuffle of the four carving directions."""
    dirs = list(CARVE_DIRECTIONS)
    for i in range(len(dirs) - 1, 0, -1):
        j = rng.randrange(i + 1)
        dirs[i], dirs[j] = dirs[j], dirs[i]
    return dirs


def carve(grid: Grid, rng: random.Random, start_x: int = 0, start_y: int = 0) -> int:
    """
    Randomized depth-first backtracking over the step-2 lattice.

    Each frame holds a node, its shuffled directions and the next direction to
    try, so the walk visits nodes in the same order a recursive carve would.
    Returns the number of lattice nodes visited.
    """
    visited: set[tuple[int, int]] = {(start_x, start_y)}
    stack: list[tuple[int, int, list[Direction], int]] = [(start_x, start_y, shuffle_directions(rng), 0)]

    while stack:
        x, y, dirs, idx = stack[-1]
        if idx >= len(dirs):
            stack.pop()
            continue
        stack[-1] = (x, y, dirs, idx + 1)

        dx, dy = dirs[idx].delta
        nx, ny = x + dx * 2, y + dy * 2
        if not grid.in_bounds(nx, ny) or (nx, ny) in visited:
            continue
        grid.open[x + dx][y + dy] = True
        grid.open[nx][ny] = True
        visited.add((nx, ny))
        stack.append((nx, ny, shuffle_directions(rng), 0))

    return len(visited)


def generate_maze(rows: int, cols: int, exit_x: int, exit_y: int, rng: random.Random) -> Grid:
    """Build a fresh grid, carve it from the origin and force the exit open."""
    grid = Grid(rows, cols, exit_x, exit_y)
    grid.open[0][0] = True
    nodes = carve(grid, rng)
    grid.open[exit_x][exit_y] = True
    logger.debug("Carved %dx%d maze over %d lattice nodes", rows, cols, nodes)
    return grid
