from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import random

from psymaze.grid import ConfigurationError, Grid, Mood, Position


DEFAULT_NPC_COUNT = 3


class NPCType(Enum):
    MENTOR = "Mentor"
    SHADOW = "Shadow"
    SAGE = "Sage"


ARCHETYPE_ORDER = (NPCType.MENTOR, NPCType.SHADOW, NPCType.SAGE)

# (happy, neutral, sad)
ARCHETYPE_LINES: dict[NPCType, tuple[str, str, str]] = {
    NPCType.MENTOR: (
        "Mentor: You’re glowing today. Use this energy wisely.",
        "Mentor: Even small steps count. Keep going.",
        "Mentor: It’s okay to move slowly. Just don’t stop.",
    ),
    NPCType.SHADOW: (
        "Shadow: Are you sure this happiness isn’t just a mask?",
        "Shadow: Silence is loud, isn’t it?",
        "Shadow: I know the dark corners. But they’re not all you are.",
    ),
    NPCType.SAGE: (
        "Sage: Joy is also data. Notice what makes it arise.",
        "Sage: Observe your mind like a sky, not the clouds.",
        "Sage: Pain is a teacher. What is it asking you to see?",
    ),
}


@dataclass
class NPC:
    position: Position
    type: NPCType
    msg_happy: str
    msg_neutral: str
    msg_sad: str
    active: bool = True

    @property
    def name(self) -> str:
        return self.type.value

    def line_for(self, mood: Mood) -> str:
        if mood == Mood.HAPPY:
            return self.msg_happy
        if mood == Mood.NEUTRAL:
            return self.msg_neutral
        return self.msg_sad


def archetype_for(index: int) -> NPCType:
    return ARCHETYPE_ORDER[index % len(ARCHETYPE_ORDER)]


def _random_path_cell(grid: Grid, rng: random.Random) -> Position:
    while True:
        x = rng.randrange(grid.rows)
        y = rng.randrange(grid.cols)
        if grid.open[x][y] and not (x == 0 and y == 0):
            return Position(x, y)


def init_npcs(count: int, grid: Grid, rng: random.Random) -> list[NPC]:
    """
    Place ``count`` archetype NPCs on random open, non-origin cells.

    Two NPCs may share a cell; nothing checks for collisions.
    """
    if count < 0:
        raise ConfigurationError("NPC count must be >= 0")
    if count and not any(p != grid.origin for p in grid.open_cells()):
        raise ConfigurationError("No open cell available for NPC placement")

    npcs: list[NPC] = []
    for i in range(count):
        kind = archetype_for(i)
        happy, neutral, sad = ARCHETYPE_LINES[kind]
        npcs.append(
            NPC(
                position=_random_path_cell(grid, rng),
                type=kind,
                msg_happy=happy,
                msg_neutral=neutral,
                msg_sad=sad,
            )
        )
    return npcs
