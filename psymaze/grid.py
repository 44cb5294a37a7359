"""Maze grid: walkability plus parallel obstacle, visited and protected layers.

Coordinates are ``(x, y)`` where ``x`` is the row and ``y`` the column, so the
origin is the top-left cell and the exit sits at ``(rows - 1, cols - 1)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


MIN_LEVEL = 1
MAX_LEVEL = 50
MIN_DIMENSION = 3


class ConfigurationError(ValueError):
    """Raised when a grid cannot be built from the requested parameters."""


class Mood(IntEnum):
    SAD = 0
    NEUTRAL = 1
    HAPPY = 2

    @property
    def face(self) -> str:
        return MOOD_FACES[self]


MOOD_FACES = {Mood.SAD: ":(", Mood.NEUTRAL: ":|", Mood.HAPPY: ":)"}


class ObstacleType(IntEnum):
    NONE = 0
    TRAP = 1
    PUZZLE = 2
    BONUS = 3
    POWERUP = 4


class Direction(Enum):
    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction in row/column terms."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        if isinstance(value, Direction):
            return value
        key = (value or "").strip().lower()
        for d in cls:
            if d.value == key:
                return d
        raise ValueError(f"Unknown direction: {value!r}")


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def step(self, direction: Direction, distance: int = 1) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx * distance, self.y + dy * distance)


@dataclass
class Player:
    position: Position = field(default_factory=lambda: Position(0, 0))
    mood: Mood = Mood.NEUTRAL

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))


def level_to_size(level: int) -> int:
    """Maze side length for a difficulty level (levels clamp to 1..50)."""
    return 9 + 2 * clamp_level(level)


def _matrix(rows: int, cols: int, value):
    return [[value for _ in range(cols)] for _ in range(rows)]


class Grid:
    def __init__(self, rows: int, cols: int, exit_x: int | None = None, exit_y: int | None = None) -> None:
        if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
            raise ConfigurationError(
                f"Maze must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {rows}x{cols}"
            )
        self.rows = rows
        self.cols = cols
        self.exit = Position(rows - 1 if exit_x is None else exit_x, cols - 1 if exit_y is None else exit_y)
        if not self.in_bounds(self.exit.x, self.exit.y):
            raise ConfigurationError(f"Exit {self.exit} lies outside a {rows}x{cols} maze")
        self.open = _matrix(rows, cols, False)
        self.obstacles = _matrix(rows, cols, ObstacleType.NONE)
        self.visited = _matrix(rows, cols, False)
        self.protected = _matrix(rows, cols, False)

    @property
    def origin(self) -> Position:
        return Position(0, 0)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.rows}x{self.cols} maze")

    def is_open(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.open[x][y]

    def set_open(self, x: int, y: int, value: bool = True) -> None:
        self._check(x, y)
        self.open[x][y] = value

    def obstacle_at(self, x: int, y: int) -> ObstacleType:
        self._check(x, y)
        return self.obstacles[x][y]

    def set_obstacle(self, x: int, y: int, obstacle: ObstacleType) -> None:
        self._check(x, y)
        self.obstacles[x][y] = obstacle

    def is_visited(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.visited[x][y]

    def mark_visited(self, x: int, y: int) -> None:
        self._check(x, y)
        self.visited[x][y] = True

    def is_protected(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self.protected[x][y]

    def protect(self, x: int, y: int) -> None:
        self._check(x, y)
        self.protected[x][y] = True

    def is_endpoint(self, x: int, y: int) -> bool:
        return (x == 0 and y == 0) or (x == self.exit.x and y == self.exit.y)

    def open_cells(self):
        for x in range(self.rows):
            for y in range(self.cols):
                if self.open[x][y]:
                    yield Position(x, y)

    def count_obstacles(self, obstacle: ObstacleType) -> int:
        return sum(row.count(obstacle) for row in self.obstacles)

    def reachable_from(self, start: Position) -> set[Position]:
        """Open cells reachable from ``start`` via the 4-neighbourhood."""
        if not self.in_bounds(start.x, start.y) or not self.open[start.x][start.y]:
            return set()
        seen = {start}
        q = [start]
        while q:
            cur = q.pop()
            for d in Direction:
                nxt = cur.step(d)
                if self.in_bounds(nxt.x, nxt.y) and self.open[nxt.x][nxt.y] and nxt not in seen:
                    seen.add(nxt)
                    q.append(nxt)
        return seen

    def is_solvable(self) -> bool:
        return self.exit in self.reachable_from(self.origin)
