"""Turn engine: one accepted command in, one outcome object out.

``MazeSession`` owns the grid, player, NPC roster, counters and the single
random source for a run. Invalid moves and jumps come back as outcomes with a
``reason``; nothing raises across a turn.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Literal

from psymaze.config import Settings, settings as default_settings
from psymaze.encounters import NPCEncounter, ObstacleEffect, SessionCounters, check_npc_encounter, resolve_obstacle
from psymaze.generator import generate_maze
from psymaze.grid import ConfigurationError, Direction, Grid, Mood, ObstacleType, Player, Position, clamp_level, level_to_size
from psymaze.morph import DEFAULT_MORPH_AMOUNT, MorphReport, morph_maze
from psymaze.npcs import NPC, init_npcs
from psymaze.obstacles import place_obstacles


logger = logging.getLogger(__name__)

DEFAULT_JUMP_DIRECTION = Direction.RIGHT
JUMP_DISTANCE = 2


@dataclass(frozen=True)
class MoveOutcome:
    success: bool
    position: Position
    obstacle_effect: ObstacleEffect | None = None
    npc_encounter: NPCEncounter | None = None
    mood_changed: bool = False
    morph: MorphReport | None = None
    reason: Literal["moved", "invalid"] = "moved"


@dataclass(frozen=True)
class JumpOutcome:
    success: bool
    position: Position
    obstacle_effect: ObstacleEffect | None = None
    mood_changed: bool = False
    morph: MorphReport | None = None
    reason: Literal["jumped", "blocked", "invalid"] = "jumped"


class MazeSession:
    def __init__(
        self,
        grid: Grid,
        npcs: list[NPC],
        rng: random.Random,
        *,
        level: int = 1,
        morph_amount: int = DEFAULT_MORPH_AMOUNT,
        player: Player | None = None,
    ) -> None:
        if morph_amount < 0:
            raise ConfigurationError(f"morph_amount must be >= 0, got {morph_amount}")
        self.grid = grid
        self.npcs = npcs
        self.rng = rng
        self.level = clamp_level(level)
        self.morph_amount = morph_amount
        self.player = player or Player()
        self.counters = SessionCounters()
        self.last_direction = DEFAULT_JUMP_DIRECTION
        self.grid.mark_visited(self.player.x, self.player.y)

    @classmethod
    def new(cls, level: int, rng: random.Random, config: Settings | None = None) -> "MazeSession":
        cfg = config or default_settings
        level = clamp_level(level)
        size = level_to_size(level)
        grid = generate_maze(size, size, size - 1, size - 1, rng)
        place_obstacles(grid, level, rng)
        grid.protect(0, 0)
        grid.protect(grid.exit.x, grid.exit.y)
        npcs = init_npcs(cfg.npc_count, grid, rng)
        logger.info("New session: level %d, %dx%d maze, %d NPCs", level, size, size, len(npcs))
        return cls(grid, npcs, rng, level=level, morph_amount=cfg.morph_amount)

    # -- queries ----------------------------------------------------------

    @property
    def position(self) -> Position:
        return self.player.position

    @property
    def exit(self) -> Position:
        return self.grid.exit

    def is_complete(self) -> bool:
        return self.player.position == self.grid.exit

    def is_open(self, x: int, y: int) -> bool:
        return self.grid.is_open(x, y)

    def obstacle_at(self, x: int, y: int) -> ObstacleType:
        return self.grid.obstacle_at(x, y)

    def is_visited(self, x: int, y: int) -> bool:
        return self.grid.is_visited(x, y)

    def npc_at(self, x: int, y: int) -> NPC | None:
        for npc in self.npcs:
            if npc.active and npc.position.x == x and npc.position.y == y:
                return npc
        return None

    # -- mutations --------------------------------------------------------

    def _enter(self, target: Position) -> ObstacleEffect | None:
        self.player.position = target
        self.grid.mark_visited(target.x, target.y)
        self.counters.steps += 1
        return resolve_obstacle(self.player, self.grid.obstacles[target.x][target.y], self.counters)

    def _reroll_mood(self, before: Mood) -> tuple[bool, MorphReport | None]:
        self.player.mood = Mood(self.rng.randrange(len(Mood)))
        if self.player.mood == before:
            return False, None
        return True, morph_maze(self.grid, self.morph_amount, self.player, self.rng)

    def apply_move(self, direction: Direction | str) -> MoveOutcome:
        try:
            d = Direction.parse(direction)
        except ValueError:
            logger.debug("Ignoring unknown direction %r", direction)
            return MoveOutcome(success=False, position=self.player.position, reason="invalid")
        self.last_direction = d
        target = self.player.position.step(d)
        if not self.grid.in_bounds(target.x, target.y) or not self.grid.open[target.x][target.y]:
            return MoveOutcome(success=False, position=self.player.position, reason="invalid")

        before = self.player.mood
        effect = self._enter(target)
        encounter = check_npc_encounter(self.player, self.npcs, self.counters)
        changed, report = self._reroll_mood(before)
        self.counters.tally(self.player.mood)
        return MoveOutcome(
            success=True,
            position=target,
            obstacle_effect=effect,
            npc_encounter=encounter,
            mood_changed=changed,
            morph=report,
        )

    def jump_target(self, direction: Direction | str | None = None) -> tuple[Position, Position]:
        d = self.last_direction if direction is None else Direction.parse(direction)
        here = self.player.position
        return here.step(d), here.step(d, JUMP_DISTANCE)

    def apply_jump(self, direction: Direction | str | None = None) -> JumpOutcome:
        """Leap two cells over a bare wall in the last (or given) direction."""
        here = self.player.position
        try:
            mid, target = self.jump_target(direction)
        except ValueError:
            logger.debug("Ignoring unknown jump direction %r", direction)
            return JumpOutcome(success=False, position=here, reason="invalid")
        if not self.grid.in_bounds(target.x, target.y):
            return JumpOutcome(success=False, position=here, reason="invalid")

        mid_obstacle = self.grid.obstacles[mid.x][mid.y]
        if not self.grid.open[mid.x][mid.y] and self.grid.open[target.x][target.y] and mid_obstacle == ObstacleType.NONE:
            before = self.player.mood
            effect = self._enter(target)
            changed, report = self._reroll_mood(before)
            return JumpOutcome(success=True, position=target, obstacle_effect=effect, mood_changed=changed, morph=report)

        if mid_obstacle != ObstacleType.NONE:
            return JumpOutcome(success=False, position=here, reason="blocked")
        return JumpOutcome(success=False, position=here, reason="invalid")

    def record_philosophy_use(self) -> None:
        self.counters.philosophy_uses += 1
