from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()


JOURNAL_FILE = "journal.txt"
PROFILE_FILE = "profile.txt"
SUMMARY_FILE = "session_stats.txt"
SNAPSHOT_FILE = "run_snapshot.txt"


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass(frozen=True)
class Settings:
    data_dir: str = os.getenv("PSYMAZE_DATA_DIR", ".")
    morph_amount: int = int(os.getenv("PSYMAZE_MORPH_AMOUNT", "3"))
    npc_count: int = int(os.getenv("PSYMAZE_NPC_COUNT", "3"))
    seed: int | None = _optional_int("PSYMAZE_SEED")
    log_level: str = os.getenv("PSYMAZE_LOG_LEVEL", "WARNING")

    def path(self, filename: str) -> str:
        return os.path.join(self.data_dir, filename)


settings = Settings()
