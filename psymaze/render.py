from __future__ import annotations

from typing import TYPE_CHECKING

from psymaze.grid import ObstacleType, Player

if TYPE_CHECKING:
    from psymaze.engine import MazeSession


OBSTACLE_GLYPHS = {
    ObstacleType.TRAP: "T",
    ObstacleType.PUZZLE: "Q",
    ObstacleType.BONUS: "B",
    ObstacleType.POWERUP: "K",
}


def cell_glyph(session: "MazeSession", x: int, y: int) -> str:
    grid = session.grid
    if session.player.x == x and session.player.y == y:
        return "P"
    if grid.exit.x == x and grid.exit.y == y:
        return "E"
    if session.npc_at(x, y) is not None:
        return "N"
    glyph = OBSTACLE_GLYPHS.get(grid.obstacles[x][y])
    if glyph:
        return glyph
    if grid.open[x][y]:
        return "*" if grid.visited[x][y] else "."
    return "#"


def render_maze(session: "MazeSession") -> str:
    grid = session.grid
    rows = []
    for x in range(grid.rows):
        rows.append(" ".join(cell_glyph(session, x, y) for y in range(grid.cols)))
    return "\n".join(rows)


def render_status(player: Player) -> str:
    return f"Player Location: ({player.x}, {player.y})\nCurrent Mood: {player.mood.face}"
