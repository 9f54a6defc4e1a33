"""Tests for RollLogger — JSONL game logging."""

import json

import pytest
from tenpin.core.telemetry import RollLogger, RollEntry


@pytest.fixture
def logger(tmp_path):
    return RollLogger(output_dir=tmp_path, game_id="test-game-001")


class TestRollLogger:
    def test_log_roll_creates_file(self, logger, tmp_path):
        logger.log_roll(_make_entry(roll_number=1))
        assert (tmp_path / "test-game-001.jsonl").exists()

    def test_creates_missing_output_dir(self, tmp_path):
        nested = tmp_path / "a" / "b"
        rl = RollLogger(output_dir=nested, game_id="g")
        assert nested.is_dir()
        assert rl.file_path == nested / "g.jsonl"

    def test_log_roll_writes_valid_jsonl(self, logger, tmp_path):
        logger.log_roll(_make_entry(roll_number=1))
        logger.log_roll(_make_entry(roll_number=2))
        lines = (tmp_path / "test-game-001.jsonl").read_text().strip().split("\n")
        assert len(lines) == 2
        for line in lines:
            parsed = json.loads(line)
            assert "roll_number" in parsed
            assert "schema_version" in parsed

    def test_log_roll_contains_all_fields(self, logger, tmp_path):
        logger.log_roll(_make_entry(roll_number=1))
        parsed = json.loads((tmp_path / "test-game-001.jsonl").read_text().strip())
        required_fields = [
            "schema_version", "game_id", "roll_number", "frame_number",
            "pins", "remaining_pins", "running_score", "is_game_over",
            "source", "ability_level", "timestamp",
        ]
        for field in required_fields:
            assert field in parsed, f"Missing field: {field}"

    def test_finalize_game_appends_summary(self, logger, tmp_path):
        logger.log_roll(_make_entry(roll_number=1))
        logger.finalize_game(final_score=300, rolls=[10] * 12, frame_scores=[30] * 10)
        lines = (tmp_path / "test-game-001.jsonl").read_text().strip().split("\n")
        assert len(lines) == 2
        summary = json.loads(lines[-1])
        assert summary["record_type"] == "game_summary"
        assert summary["final_score"] == 300
        assert summary["engine_version"]

    def test_finalize_game_extra_fields(self, logger, tmp_path):
        logger.finalize_game(final_score=0, rolls=[], frame_scores=[], extra={"seed": 7})
        summary = json.loads((tmp_path / "test-game-001.jsonl").read_text().strip())
        assert summary["seed"] == 7

    def test_game_id_in_every_line(self, logger, tmp_path):
        logger.log_roll(_make_entry(roll_number=1))
        logger.log_roll(_make_entry(roll_number=2))
        for line in (tmp_path / "test-game-001.jsonl").read_text().strip().split("\n"):
            assert json.loads(line)["game_id"] == "test-game-001"


def _make_entry(roll_number: int = 1) -> RollEntry:
    return RollEntry(
        roll_number=roll_number,
        frame_number=1,
        pins=7,
        remaining_pins=3,
        running_score=7,
        is_game_over=False,
        source="random",
        ability_level=0.25,
    )
