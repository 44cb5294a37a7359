from __future__ import annotations

import logging
import re

from pydantic import BaseModel, Field, ValidationError, field_validator

from psymaze.grid import MAX_LEVEL, MIN_LEVEL, clamp_level


logger = logging.getLogger(__name__)

DOUBLE_LEVEL_XP = 60
SINGLE_LEVEL_XP = 30

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class PlayerProfile(BaseModel):
    level: int = Field(MIN_LEVEL, ge=MIN_LEVEL, le=MAX_LEVEL)

    @field_validator("level", mode="before")
    @classmethod
    def _clamp(cls, v):
        return clamp_level(int(v))


def load_profile(path: str) -> PlayerProfile:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        return PlayerProfile()
    except OSError as e:
        logger.warning("Profile read from %s failed: %s", path, e)
        return PlayerProfile()

    # leading integer only, so "3abc" reads as 3
    match = _LEADING_INT.match(raw)
    if match is None:
        if raw.strip():
            logger.info("Ignoring malformed profile %r", raw.strip()[:20])
        return PlayerProfile()
    try:
        return PlayerProfile(level=match.group(1))
    except (ValidationError, ValueError):
        logger.info("Ignoring malformed profile level %r", match.group(1))
        return PlayerProfile()


def load_player_level(path: str) -> int:
    return load_profile(path).level


def save_player_level(path: str, level: int) -> bool:
    profile = PlayerProfile(level=level)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{profile.level}\n")
        return True
    except OSError as e:
        logger.warning("Profile write to %s failed: %s", path, e)
        return False


def next_level(base_level: int, xp: int) -> int:
    level = base_level
    if xp >= DOUBLE_LEVEL_XP:
        level += 2
    elif xp >= SINGLE_LEVEL_XP:
        level += 1
    return min(level, MAX_LEVEL)
