"""Tests for the python -m tenpin entry point."""

import sys

import pytest
from tenpin.__main__ import main


def _run(monkeypatch, *argv) -> int:
    monkeypatch.setattr(sys, "argv", ["tenpin", *argv])
    with pytest.raises(SystemExit) as excinfo:
        main()
    return excinfo.value.code


class TestScoreCommand:
    def test_perfect_game(self, monkeypatch, capsys):
        assert _run(monkeypatch, "score", *["10"] * 12) == 0
        out = capsys.readouterr().out
        assert "300" in out
        assert "Game over" in out

    def test_comma_separated(self, monkeypatch, capsys):
        assert _run(monkeypatch, "score", "9,1,10") == 0
        assert "Score: 30" in capsys.readouterr().out

    def test_illegal_roll(self, monkeypatch, capsys):
        assert _run(monkeypatch, "score", "6", "5") == 1
        assert "roll 2" in capsys.readouterr().err


class TestSimulateCommand:
    def test_simulate_writes_logs(self, monkeypatch, capsys, tmp_output):
        code = _run(
            monkeypatch, "simulate", "-n", "2", "--ability", "1", "--seed", "3",
            "-o", str(tmp_output),
        )
        assert code == 0
        out = capsys.readouterr().out
        assert "High: 300" in out
        assert len(list(tmp_output.glob("*.jsonl"))) == 2

    def test_bad_ability(self, monkeypatch, capsys):
        assert _run(monkeypatch, "simulate", "--ability", "2") == 2
        assert "ability_level" in capsys.readouterr().err

    def test_missing_config(self, monkeypatch, tmp_path):
        assert _run(monkeypatch, "simulate", str(tmp_path / "nope.yaml")) == 1

    @pytest.mark.parametrize("games", ["0", "-3"])
    def test_game_count_below_one(self, monkeypatch, capsys, games):
        assert _run(monkeypatch, "simulate", "-n", games) == 2
        captured = capsys.readouterr()
        assert "session.games" in captured.err
        assert "Simulating" not in captured.out

    @pytest.mark.parametrize("seed", [str(2**70), str(-(2**63) - 1)])
    def test_seed_out_of_range(self, monkeypatch, capsys, seed):
        assert _run(monkeypatch, "simulate", "--seed", seed) == 2
        assert "session.seed" in capsys.readouterr().err

    def test_bad_seed_in_config_file(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text('session:\n  seed: "abc"\n')
        assert _run(monkeypatch, "simulate", str(path)) == 2
        assert "session.seed" in capsys.readouterr().err


class TestPlayCommand:
    def test_scripted_session(self, monkeypatch, capsys):
        lines = iter(["7", "x", "3", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        assert _run(monkeypatch, "play") == 0
        out = capsys.readouterr().out
        assert "The last roll knocked down 3 pins." in out
        assert "whole number" in out

    def test_eof_ends_session(self, monkeypatch):
        def _eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert _run(monkeypatch, "play") == 0
