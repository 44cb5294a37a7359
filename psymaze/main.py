from __future__ import annotations

import argparse
import logging
import random
import time
from typing import Callable

from psymaze.config import JOURNAL_FILE, PROFILE_FILE, SNAPSHOT_FILE, SUMMARY_FILE, Settings, settings
from psymaze.engine import JumpOutcome, MazeSession, MoveOutcome
from psymaze.grid import MAX_LEVEL, MIN_LEVEL, clamp_level
from psymaze.encounters import NPCEncounter, ObstacleEffect
from psymaze.render import render_maze, render_status
from psymaze.services.journal import append_reflection, format_journal, log_life_lesson, read_journal
from psymaze.services.philosophy import EXERCISE_LESSON, pick_support
from psymaze.services.profile import load_player_level, next_level, save_player_level
from psymaze.services.snapshot import save_run_snapshot
from psymaze.services.summary import (
    SessionSummary,
    compute_achievements,
    mood_bars,
    save_session_summary,
    speedrun_medal,
    total_xp,
)


logger = logging.getLogger(__name__)

MOVE_KEYS = ("w", "a", "s", "d")
PROMPT = "\nMove (w/a/s/d), 'j' to jump, 'l' for journal, 'p' to save, 'h' for wisdom, 'q' to quit: "
MORPH_NOTICE = "\nThe maze feels different... mood shift is morphing the labyrinth!"


class SessionController:
    """Console turn loop around a :class:`MazeSession`."""

    def __init__(
        self,
        config: Settings = settings,
        *,
        input_fn: Callable[[str], str] | None = None,
        print_fn: Callable[..., None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.input_fn = input_fn or input
        self.print = print_fn or print
        seed = config.seed if config.seed is not None else time.time_ns()
        self.rng = rng or random.Random(seed)
        self.session: MazeSession | None = None

    # -- I/O helpers -------------------------------------------------------

    def ask(self, prompt: str) -> str | None:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def journal(self, message: str) -> None:
        if not log_life_lesson(self.config.path(JOURNAL_FILE), message):
            self.print("Could not open journal file.")

    def choose_level(self, base_level: int) -> int | None:
        self.print(f"Saved player level (from previous runs): {base_level}")
        raw = self.ask(f"Choose level to play ({MIN_LEVEL}–{MAX_LEVEL}): ")
        if raw is None:
            return None
        try:
            return clamp_level(int(raw.strip()))
        except ValueError:
            self.print(f"Not a number, starting at level {base_level}.")
            return clamp_level(base_level)

    def show_philosophy(self) -> bool:
        support = pick_support(self.rng)
        self.print(f"\n--- {support.title} ---")
        self.print(support.text)
        if support.kind == "exercise":
            choice = self.ask("\nDo you want to answer this? (y/n): ")
            if choice is None:
                return False
            if choice.strip().lower().startswith("y"):
                if self.ask("Your reflection: ") is None:
                    return False
                self.print("\nThanks for sharing. Even small reflections can change how you move in the maze and in life.")
                self.journal(EXERCISE_LESSON)
            else:
                self.print("That's okay. Not every question needs an answer right now.")
        self.print("----------------------------")
        return True

    # -- outcome reporting -------------------------------------------------

    def report_effect(self, effect: ObstacleEffect | None) -> None:
        if effect is None:
            return
        self.print(effect.message)
        self.journal(effect.lesson)

    def report_encounter(self, encounter: NPCEncounter | None) -> None:
        if encounter is None:
            return
        self.print("\n--- NPC Encounter ---")
        self.print(encounter.line)
        for hint in encounter.hints:
            self.print(hint)
        self.print("NPC: Before you go, answer this in one line:")
        self.print("     What is one thing you learned in this maze so far?")
        answer = self.ask("Your reflection: ")
        if answer is not None:
            self.print("NPC: Thank you. Even small reflections change how you move.")
            self.journal("NPC reflection from player:")
            self.journal(answer.strip())
        self.print("----------------------")
        self.journal(encounter.lesson)

    def report_move(self, outcome: MoveOutcome) -> None:
        if not outcome.success:
            self.print("Invalid move!")
            return
        self.report_effect(outcome.obstacle_effect)
        self.report_encounter(outcome.npc_encounter)
        if outcome.mood_changed:
            self.print(MORPH_NOTICE)

    def report_jump(self, outcome: JumpOutcome) -> None:
        if outcome.reason == "blocked":
            self.print("Oops! You tried to jump a special tile. Solve this word puzzle to proceed!")
            return
        if not outcome.success:
            self.print("Invalid jump!")
            return
        self.print("You jumped over a wall!")
        self.report_effect(outcome.obstacle_effect)
        if outcome.mood_changed:
            self.print(MORPH_NOTICE)

    # -- main loop ---------------------------------------------------------

    def play_turn(self, command: str) -> bool:
        """Apply one command. Returns False when the player quits."""
        session = self.session
        cmd = command.strip().lower()[:1]
        if cmd in MOVE_KEYS:
            self.report_move(session.apply_move(cmd))
        elif cmd == "j":
            self.report_jump(session.apply_jump())
        elif cmd == "l":
            self.print(format_journal(read_journal(self.config.path(JOURNAL_FILE))))
        elif cmd == "p":
            path = self.config.path(SNAPSHOT_FILE)
            if save_run_snapshot(path, session):
                self.print(f"Run snapshot saved to {path}")
            else:
                self.print("Could not open snapshot file.")
        elif cmd == "h":
            if self.show_philosophy():
                session.record_philosophy_use()
        elif cmd == "q":
            return False
        else:
            self.print("Invalid input!")
        return True

    def run(self, level: int | None = None) -> SessionSummary | None:
        base_level = load_player_level(self.config.path(PROFILE_FILE))
        if level is None:
            level = self.choose_level(base_level)
            if level is None:
                return None
        level = clamp_level(level)

        self.session = MazeSession.new(level, self.rng, self.config)
        size = self.session.grid.rows
        self.print(f"Starting level {level} -> maze size {size} x {size}")

        while not self.session.is_complete():
            if not self.show_philosophy():
                return None
            if self.ask("\nPress Enter to continue...\n") is None:
                return None
            self.print(render_maze(self.session))
            self.print(render_status(self.session.player))
            command = self.ask(PROMPT)
            if command is None or not self.play_turn(command):
                self.print("\nYou leave the maze for now.")
                return None

        return self.finish(base_level)

    def finish(self, base_level: int) -> SessionSummary:
        session = self.session
        self.print(render_maze(session))
        self.print(render_status(session.player))
        self.print("\nCongratulations! You reached the exit.")

        summary = SessionSummary.from_counters(session.counters)
        self.print("\n===== SESSION ANALYTICS =====")
        self.print(f"Total steps taken: {summary.steps}")
        self.print("Mood counts:")
        self.print(f"  Sad:     {summary.sad}")
        self.print(f"  Neutral: {summary.neutral}")
        self.print(f"  Happy:   {summary.happy}")
        self.print("Obstacles encountered:")
        self.print(f"  Traps:   {summary.traps}")
        self.print(f"  Puzzles: {summary.puzzles}")
        self.print(f"  Bonuses: {summary.bonuses}")
        self.print(f"Philosophy uses (quotes/exercises): {summary.philosophy_uses}")
        bars = mood_bars(summary)
        if bars:
            self.print("\n" + bars.rstrip("\n"))
        self.print("===== END OF SESSION =====")

        medal, blurb = speedrun_medal(summary.steps)
        self.print("\n===== SPEEDRUN RESULT =====")
        self.print(f"Medal: {medal} – {blurb}")
        self.print("===========================")

        achievements = compute_achievements(summary)
        xp = total_xp(achievements)
        self.print("\n===== ACHIEVEMENTS =====")
        for a in achievements:
            self.print(str(a))
        self.print(f"Total XP this run: {xp}")
        self.print("========================")
        self.print(f"You earned {xp} XP this session!")

        new_level = next_level(base_level, xp)
        self.print(f"Player level went from {base_level} to {new_level}.")
        if not save_player_level(self.config.path(PROFILE_FILE), new_level):
            self.print("Could not save player level.")
        if not save_session_summary(self.config.path(SUMMARY_FILE), summary):
            self.print("Could not open summary file.")

        self.ask_end_of_session_reflection()
        return summary

    def ask_end_of_session_reflection(self) -> None:
        choice = self.ask("\nDo you want to write a short reflection about this run? (y/n): ")
        if choice is None or not choice.strip().lower().startswith("y"):
            self.print("No reflection this time. That’s okay.")
            return
        line = self.ask("Write your reflection (one line): ")
        if line is None:
            return
        if append_reflection(self.config.path(JOURNAL_FILE), line):
            self.print("Reflection saved to journal.")
        else:
            self.print("Could not open journal file to save reflection.")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="psymaze", description="A mood-shaped text maze.")
    parser.add_argument("--level", type=int, help="skip the level prompt")
    parser.add_argument("--seed", type=int, help="fixed random seed for the run")
    parser.add_argument("--data-dir", help="where journal/profile/summary files live")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.WARNING))

    cfg = Settings(
        data_dir=args.data_dir or settings.data_dir,
        morph_amount=settings.morph_amount,
        npc_count=settings.npc_count,
        seed=args.seed if args.seed is not None else settings.seed,
        log_level=settings.log_level,
    )
    try:
        SessionController(cfg).run(level=args.level)
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
