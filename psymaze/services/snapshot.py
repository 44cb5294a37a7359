from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from psymaze.grid import ObstacleType

if TYPE_CHECKING:
    from psymaze.engine import MazeSession


logger = logging.getLogger(__name__)

# Power-ups are not drawn in snapshots; the cell shows as plain path.
_SNAPSHOT_GLYPHS = {
    ObstacleType.TRAP: "T",
    ObstacleType.PUZZLE: "Q",
    ObstacleType.BONUS: "B",
}


def snapshot_text(session: "MazeSession") -> str:
    grid = session.grid
    player = session.player
    lines = [
        "PsyMaze Snapshot",
        f"Size: {grid.rows} x {grid.cols}",
        f"Player: ({player.x},{player.y}) Mood: {player.mood.face}",
        f"Exit: ({grid.exit.x},{grid.exit.y})",
        "Maze:",
    ]
    for x in range(grid.rows):
        row = []
        for y in range(grid.cols):
            if x == player.x and y == player.y:
                row.append("P")
            elif x == grid.exit.x and y == grid.exit.y:
                row.append("E")
            elif grid.obstacles[x][y] in _SNAPSHOT_GLYPHS:
                row.append(_SNAPSHOT_GLYPHS[grid.obstacles[x][y]])
            elif grid.open[x][y]:
                row.append(".")
            else:
                row.append("#")
        lines.append("".join(row))
    return "\n".join(lines) + "\n"


def save_run_snapshot(path: str, session: "MazeSession") -> bool:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(snapshot_text(session))
    except OSError as e:
        logger.warning("Snapshot write to %s failed: %s", path, e)
        return False
    return True
