from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

from psymaze.grid import Grid, Mood, ObstacleType, Player, Position


logger = logging.getLogger(__name__)

DEFAULT_MORPH_AMOUNT = 3
RELOCATABLE_OBSTACLES = (ObstacleType.TRAP, ObstacleType.PUZZLE, ObstacleType.BONUS)


@dataclass
class MorphReport:
    mood: Mood
    toggled: list[Position] = field(default_factory=list)
    skipped: int = 0
    relocated: Position | None = None
    relocated_to: ObstacleType | None = None


def _toggle_for_mood(is_open: bool, mood: Mood) -> bool | None:
    """New walkability for a cell, or None when the mood leaves it alone."""
    # sad-on-open and happy-on-wall are skipped, not flipped
    if mood == Mood.SAD:
        return True if not is_open else None
    if mood == Mood.HAPPY:
        return False if is_open else None
    return not is_open


def morph_maze(grid: Grid, morph_amount: int, player: Player, rng: random.Random) -> MorphReport:
    """
    Mood-biased structural mutation: sad opens walls, happy closes paths,
    neutral flips. Protected cells and the player's own cell are never touched.
    One obstacle is then reassigned on a random open cell.

    No connectivity repair is attempted; the exit may become unreachable.
    """
    if morph_amount < 0:
        raise ValueError("morph_amount must be >= 0")
    report = MorphReport(mood=player.mood)

    for _ in range(morph_amount):
        x = rng.randrange(grid.rows)
        y = rng.randrange(grid.cols)
        if grid.protected[x][y] or (x == player.x and y == player.y):
            report.skipped += 1
            continue
        new_value = _toggle_for_mood(grid.open[x][y], player.mood)
        if new_value is None:
            continue
        grid.open[x][y] = new_value
        report.toggled.append(Position(x, y))

    ox = rng.randrange(grid.rows)
    oy = rng.randrange(grid.cols)
    if not grid.protected[ox][oy] and grid.open[ox][oy] and not (ox == player.x and oy == player.y):
        obstacle = RELOCATABLE_OBSTACLES[rng.randrange(len(RELOCATABLE_OBSTACLES))]
        grid.obstacles[ox][oy] = obstacle
        report.relocated = Position(ox, oy)
        report.relocated_to = obstacle

    logger.debug(
        "Morph (%s): toggled=%d skipped=%d relocated=%s",
        player.mood.name, len(report.toggled), report.skipped, report.relocated,
    )
    return report
