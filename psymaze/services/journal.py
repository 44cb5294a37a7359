from __future__ import annotations

import logging


logger = logging.getLogger(__name__)

REFLECTION_PREFIX = "[End-of-session reflection]"


def _append_line(path: str, line: str) -> bool:
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{line}\n")
        return True
    except OSError as e:
        logger.warning("Journal write to %s failed: %s", path, e)
        return False


def log_life_lesson(path: str, message: str) -> bool:
    return _append_line(path, message)


def append_reflection(path: str, text: str) -> bool:
    return _append_line(path, f"{REFLECTION_PREFIX} {text.strip()}")


def read_journal(path: str) -> list[str] | None:
    """Journal lines without trailing newlines, or None if there is no journal yet."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f]
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning("Journal read from %s failed: %s", path, e)
        return None


def format_journal(lines: list[str] | None) -> str:
    if lines is None:
        return "\nNo journal entries yet. Go live a little in the maze first.\n"
    body = "\n".join(f"- {line}" for line in lines)
    return f"\n===== Life Lessons Journal =====\n{body}\n================================\n"
