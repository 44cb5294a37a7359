"""End-of-run analytics: summary file, achievements, XP and speedrun medal."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from pydantic import BaseModel, Field

from psymaze.encounters import SessionCounters
from psymaze.grid import Mood


logger = logging.getLogger(__name__)


class SessionSummary(BaseModel):
    steps: int = Field(0, ge=0)
    sad: int = Field(0, ge=0)
    neutral: int = Field(0, ge=0)
    happy: int = Field(0, ge=0)
    traps: int = Field(0, ge=0)
    puzzles: int = Field(0, ge=0)
    bonuses: int = Field(0, ge=0)
    philosophy_uses: int = Field(0, ge=0)

    @classmethod
    def from_counters(cls, counters: SessionCounters) -> "SessionSummary":
        return cls(
            steps=counters.steps,
            sad=counters.moods.get(Mood.SAD, 0),
            neutral=counters.moods.get(Mood.NEUTRAL, 0),
            happy=counters.moods.get(Mood.HAPPY, 0),
            traps=counters.traps,
            puzzles=counters.puzzles,
            bonuses=counters.bonuses,
            philosophy_uses=counters.philosophy_uses,
        )

    def to_text(self) -> str:
        return (
            "=== New Session ===\n"
            f"Steps: {self.steps}\n"
            f"Moods: Sad={self.sad} Neutral={self.neutral} Happy={self.happy}\n"
            f"Obstacles: Traps={self.traps} Puzzles={self.puzzles} Bonuses={self.bonuses}\n"
            f"Philosophy uses: {self.philosophy_uses}\n\n"
        )


@dataclass(frozen=True)
class Achievement:
    title: str
    description: str
    xp: int

    def __str__(self) -> str:
        return f"{self.title} ({self.description})"


def save_session_summary(path: str, summary: SessionSummary) -> bool:
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(summary.to_text())
        return True
    except OSError as e:
        logger.warning("Summary write to %s failed: %s", path, e)
        return False


def compute_achievements(s: SessionSummary) -> list[Achievement]:
    out: list[Achievement] = []
    if s.steps < 50:
        out.append(Achievement("Efficient Explorer", "finished in under 50 steps", 30))
    elif s.steps > 200:
        out.append(Achievement("Persistent Wanderer", "kept going despite a long path", 20))
    if s.happy > s.sad:
        out.append(Achievement("Bringer of Light", "more happy moods than sad", 20))
    if s.philosophy_uses >= 3:
        out.append(Achievement("Reflective Seeker", "used philosophy support 3+ times", 25))
    if s.puzzles >= 2:
        out.append(Achievement("Riddle Breaker", "solved multiple puzzles", 15))
    if s.traps == 0:
        out.append(Achievement("Untouched by Traps", "avoided all traps", 30))
    if s.traps > 0 and s.sad > 0:
        out.append(Achievement("Resilient Soul", "kept going despite traps and sadness", 15))
    return out


def total_xp(achievements: list[Achievement]) -> int:
    return sum(a.xp for a in achievements)


def speedrun_medal(steps: int) -> tuple[str, str]:
    if steps <= 40:
        return "GOLD", "You found a very efficient path through the maze!"
    if steps <= 80:
        return "SILVER", "Balanced between exploration and efficiency."
    if steps <= 140:
        return "BRONZE", "You made it, with plenty of detours."
    return "EXPLORER", "You took your time and saw a lot of the maze."


def mood_bars(s: SessionSummary) -> str:
    if s.sad + s.neutral + s.happy == 0:
        return ""
    return (
        "Mood distribution (ASCII):\n"
        f"Sad:     {'*' * s.sad}\n"
        f"Neutral: {'*' * s.neutral}\n"
        f"Happy:   {'*' * s.happy}\n"
    )
