"""Obstacle resolution and NPC encounters.

Both entry points mutate the player/counters/NPC they are handed and return a
plain result object describing what happened; printing and journaling are left
to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Literal

from psymaze.grid import Mood, ObstacleType, Player
from psymaze.npcs import NPC


logger = logging.getLogger(__name__)

LONG_WALK_STEPS = 150
SEEKER_PHILOSOPHY_USES = 3

HINT_LONG_WALK = "NPC: You've been wandering a long time... what keeps you going?"
HINT_TRAPS = "NPC: I see you've survived some traps. What did they teach you?"
HINT_SEEKER = "NPC: You seek wisdom often. That curiosity is your true power."

NPC_LESSON = "You met an archetype in the maze: guidance appears in many forms when you keep moving."

Outcome = Literal["failed", "avoided", "shifted", "rewarded", "shortcut", "heavy", "steady"]


@dataclass
class SessionCounters:
    traps: int = 0
    puzzles: int = 0
    bonuses: int = 0
    steps: int = 0
    philosophy_uses: int = 0
    moods: dict[Mood, int] = field(default_factory=lambda: {m: 0 for m in Mood})

    def tally(self, mood: Mood) -> None:
        self.moods[mood] = self.moods.get(mood, 0) + 1


@dataclass(frozen=True)
class ObstacleEffect:
    obstacle: ObstacleType
    outcome: Outcome
    mood_before: Mood
    mood_after: Mood
    message: str
    lesson: str


@dataclass(frozen=True)
class NPCEncounter:
    npc: NPC
    line: str
    hints: list[str]
    lesson: str = NPC_LESSON


def resolve_obstacle(player: Player, obstacle: ObstacleType, counters: SessionCounters) -> ObstacleEffect | None:
    before = player.mood

    if obstacle == ObstacleType.TRAP:
        counters.traps += 1
        if player.mood != Mood.HAPPY:
            player.mood = Mood.SAD
            outcome, message, lesson = (
                "failed",
                "You hit a trap! Only Happy players can pass. You lose a turn. Try to cheer up!",
                "You hit a trap while not happy: sometimes you need inner strength before facing certain challenges.",
            )
        else:
            outcome, message, lesson = (
                "avoided",
                "You happily avoided the trap!",
                "You avoided a trap while happy: good moods can help you navigate problems more lightly.",
            )
    elif obstacle == ObstacleType.PUZZLE:
        counters.puzzles += 1
        player.mood = Mood((player.mood + 1) % 3)
        outcome, message, lesson = (
            "shifted",
            "You found a puzzle! It alters your mood.",
            "You faced a puzzle: complex situations can shift how you feel and think.",
        )
    elif obstacle == ObstacleType.BONUS:
        counters.bonuses += 1
        player.mood = Mood.HAPPY
        outcome, message, lesson = (
            "rewarded",
            "You found a bonus! Your mood is now Happy!",
            "You found a bonus: good surprises can flip a bad day into a brighter one.",
        )
    elif obstacle == ObstacleType.POWERUP:
        if player.mood == Mood.HAPPY:
            outcome, message, lesson = (
                "shortcut",
                "You found a power-up tile!\nYour joy unlocks a shortcut somewhere in the maze.",
                "Happiness unlocked new paths: positive states can reveal hidden options.",
            )
        elif player.mood == Mood.SAD:
            outcome, message, lesson = (
                "heavy",
                "You found a power-up tile!\nIn sadness, the maze feels heavier.",
                "Sadness closed some paths: sometimes our mood narrows our vision.",
            )
        else:
            outcome, message, lesson = (
                "steady",
                "You found a power-up tile!\nNeutral mind, neutral maze: nothing changes, yet.",
                "Neutrality kept the maze steady: not every moment needs change.",
            )
    else:
        return None

    logger.debug("Obstacle %s -> %s (%s -> %s)", obstacle.name, outcome, before.name, player.mood.name)
    return ObstacleEffect(
        obstacle=obstacle,
        outcome=outcome,
        mood_before=before,
        mood_after=player.mood,
        message=message,
        lesson=lesson,
    )


def encounter_hints(counters: SessionCounters) -> list[str]:
    hints = []
    if counters.steps > LONG_WALK_STEPS:
        hints.append(HINT_LONG_WALK)
    if counters.traps > 0:
        hints.append(HINT_TRAPS)
    if counters.philosophy_uses >= SEEKER_PHILOSOPHY_USES:
        hints.append(HINT_SEEKER)
    return hints


def check_npc_encounter(player: Player, npcs: Iterable[NPC], counters: SessionCounters) -> NPCEncounter | None:
    """Fire the first active NPC on the player's cell, then retire it for the session."""
    for npc in npcs:
        if not npc.active:
            continue
        if npc.position == player.position:
            npc.active = False
            logger.debug("NPC %s encountered at %s", npc.name, npc.position)
            return NPCEncounter(npc=npc, line=npc.line_for(player.mood), hints=encounter_hints(counters))
    return None
