"""RollLogger — JSONL game logging.

One logger per game. Writes one JSONL line per accepted roll plus a game
summary as the final line. All entries include schema version and game ID.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path

import tenpin

_SCHEMA_VERSION = "1.0.0"


@dataclass
class RollEntry:
    """One accepted roll of game telemetry."""

    roll_number: int
    frame_number: int
    pins: int
    remaining_pins: int
    running_score: int
    is_game_over: bool
    source: str  # "manual" or "random"
    ability_level: float | None = None


class RollLogger:
    """Writes JSONL telemetry for a single game."""

    def __init__(self, output_dir: Path, game_id: str):
        self._output_dir = Path(output_dir)
        self._game_id = game_id
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{game_id}.jsonl"

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def game_id(self) -> str:
        return self._game_id

    def log_roll(self, entry: RollEntry) -> None:
        record = asdict(entry)
        record["schema_version"] = _SCHEMA_VERSION
        record["game_id"] = self._game_id
        record["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._append(record)

    def finalize_game(
        self,
        final_score: int,
        rolls: list[int],
        frame_scores: list[int],
        extra: dict | None = None,
    ) -> None:
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "game_summary",
            "game_id": self._game_id,
            "final_score": final_score,
            "rolls": rolls,
            "frame_scores": frame_scores,
            "engine_version": tenpin.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if extra:
            record.update(extra)
        self._append(record)

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
