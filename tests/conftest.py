"""Shared fixtures for the PsyMaze test suite.

Provides seeded and scripted random sources, a grid builder that reads small
ASCII maps, and factory fixtures for MazeSession / SessionController.
"""

import os
import random
import sys

import pytest

# Add project root to path so `import psymaze...` works without installing.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from psymaze.config import Settings
from psymaze.engine import MazeSession
from psymaze.grid import Grid, Mood, ObstacleType, Player, Position
from psymaze.main import SessionController


# ============================================================
# RANDOM SOURCES
# ============================================================

class ScriptedRandom:
    """Stand-in for random.Random that replays a fixed list of randrange results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, n):
        assert self.values, f"ScriptedRandom exhausted (randrange({n}))"
        v = self.values.pop(0)
        assert 0 <= v < n, f"scripted value {v} out of range for randrange({n})"
        self.calls.append(n)
        return v


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng([values...]) -> ScriptedRandom."""
    return ScriptedRandom


# ============================================================
# GRID BUILDER
# ============================================================

_OBSTACLE_CHARS = {
    "T": ObstacleType.TRAP,
    "Q": ObstacleType.PUZZLE,
    "B": ObstacleType.BONUS,
    "K": ObstacleType.POWERUP,
}


def grid_from_rows(rows):
    """
    Build a Grid from strings: '#' wall, '.' open, T/Q/B/K open cell with an
    obstacle. Exit is always the bottom-right cell.
    """
    grid = Grid(len(rows), len(rows[0]))
    for x, line in enumerate(rows):
        for y, ch in enumerate(line):
            grid.open[x][y] = ch != "#"
            grid.obstacles[x][y] = _OBSTACLE_CHARS.get(ch, ObstacleType.NONE)
    return grid


@pytest.fixture
def make_grid():
    return grid_from_rows


@pytest.fixture
def corridor_rows():
    """3x3 L-shaped corridor from origin to exit."""
    return [
        "...",
        "##.",
        "##.",
    ]


# ============================================================
# SESSION FACTORIES
# ============================================================

@pytest.fixture
def make_session():
    """Factory: make_session(rows, rng=..., npcs=[], mood=..., at=(x, y), morph_amount=3)."""

    def _factory(rows, rng=None, npcs=None, mood=Mood.NEUTRAL, at=(0, 0), morph_amount=3):
        grid = grid_from_rows(rows)
        player = Player(position=Position(*at), mood=mood)
        return MazeSession(
            grid,
            npcs or [],
            rng if rng is not None else random.Random(7),
            morph_amount=morph_amount,
            player=player,
        )

    return _factory


@pytest.fixture
def data_settings(tmp_path):
    return Settings(data_dir=str(tmp_path), morph_amount=3, npc_count=3, seed=4242, log_level="WARNING")


@pytest.fixture
def make_controller(data_settings):
    """Factory: make_controller(inputs, rng=None) -> (controller, printed_lines)."""

    def _factory(inputs=None, rng=None, config=None):
        printed = []
        queue = list(inputs or [])

        def fake_input(prompt):
            if not queue:
                raise EOFError
            return queue.pop(0)

        def fake_print(*args, **kwargs):
            printed.append(" ".join(str(a) for a in args))

        controller = SessionController(
            config or data_settings,
            input_fn=fake_input,
            print_fn=fake_print,
            rng=rng or random.Random(99),
        )
        return controller, printed

    return _factory
