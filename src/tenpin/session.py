"""BowlingSession — drives a Game the way a scorecard UI does.

Wraps a Game and a RandomRoller behind button-style operations (add a
roll, add random rolls, finish the game, start over), keeps the last
message for display, and never lets an invalid roll escape to the caller.

simulate() plays whole games with seeded random bowlers and reports
per-game and aggregate results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tenpin.config import BowlingConfig, validate_session
from tenpin.core.display import DisplayFrame
from tenpin.core.game import Game
from tenpin.core.roller import RandomRoller
from tenpin.core.seed import SeedManager
from tenpin.core.telemetry import RollEntry, RollLogger
from tenpin.exceptions import InvalidConfiguration, InvalidRoll

__all__ = ["BowlingSession", "GameResult", "SimulationResult", "simulate"]

logger = logging.getLogger(__name__)


class BowlingSession:
    """One bowler's lane: a Game, a random bowler, and a message line."""

    def __init__(
        self,
        game: Game | None = None,
        roller: RandomRoller | None = None,
        roll_logger: RollLogger | None = None,
    ) -> None:
        self.game = game or Game()
        self.roller = roller or RandomRoller()
        self._roll_logger = roll_logger
        self.message: str = ""
        self.is_error: bool = False

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def _info(self, text: str) -> None:
        self.message = text
        self.is_error = False

    def _error(self, text: str) -> None:
        logger.warning("%s", text)
        self.message = text
        self.is_error = True

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def new_game(self) -> None:
        self.game.new_game()
        self._info("Get ready to roll")

    def add_roll(self, value, source: str = "manual") -> int | None:
        """Add a roll; on rejection record the reason and return None."""
        try:
            pins = self.game.add_roll(value)
        except InvalidRoll as exc:
            self._error(str(exc))
            return None

        self._info(f"The last roll knocked down {pins} {'pin' if pins == 1 else 'pins'}.")
        if self._roll_logger is not None:
            self._log_roll(pins, source)
        return pins

    def add_random_roll(self) -> int | None:
        pins = self.roller.roll(self.game.remaining_pins)
        return self.add_roll(pins, source="random")

    def add_random_rolls(self, count: int) -> list[int]:
        """Add up to *count* random rolls, stopping early if the game ends."""
        if self.game.is_game_over:
            self._error("The game is already complete.")
            return []
        rolled = []
        for _ in range(count):
            if self.game.is_game_over:
                break
            pins = self.add_random_roll()
            if pins is None:
                break
            rolled.append(pins)
        return rolled

    def complete_game(self) -> list[int]:
        """Roll randomly until the game is over."""
        if self.game.is_game_over:
            self._error("The game is already complete.")
            return []
        rolled = []
        while not self.game.is_game_over:
            rolled.append(self.add_random_roll())
        return rolled

    def set_ability(self, level) -> bool:
        try:
            self.roller.ability_level = level
        except InvalidConfiguration as exc:
            self._error(str(exc))
            return False
        return True

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def scorecard(self) -> list[DisplayFrame]:
        return self.game.process_rolls()

    def roll_log(self) -> list[str]:
        """Numbered roll lines, e.g. ' 1: 10'."""
        return [f"{i:>2}: {pins:>2}" for i, pins in enumerate(self.game.rolls, start=1)]

    def finalize(self, extra: dict | None = None) -> None:
        """Write the game summary line to the roll log, if one is attached."""
        if self._roll_logger is None:
            return
        frames = self.game.frames()
        self._roll_logger.finalize_game(
            final_score=self.game.score,
            rolls=list(self.game.rolls),
            frame_scores=[f.running_score for f in frames if f.is_complete],
            extra=extra,
        )

    def _log_roll(self, pins: int, source: str) -> None:
        frames = self.game.frames()
        self._roll_logger.log_roll(
            RollEntry(
                roll_number=len(self.game.rolls),
                frame_number=len(frames),
                pins=pins,
                remaining_pins=self.game.remaining_pins,
                running_score=self.game.score,
                is_game_over=self.game.is_game_over,
                source=source,
                ability_level=self.roller.ability_level if source == "random" else None,
            )
        )


# ======================================================================
# Simulation
# ======================================================================

@dataclass
class GameResult:
    """Outcome of one simulated game."""

    game_id: str
    seed: int
    rolls: list[int]
    final_score: int
    strikes: int
    spares: int
    scorecard: list[DisplayFrame]
    log_path: Path | None = None


@dataclass
class SimulationResult:
    """Aggregate of all simulated games."""

    games: list[GameResult]

    @property
    def scores(self) -> list[int]:
        return [g.final_score for g in self.games]

    @property
    def high(self) -> int:
        return max(self.scores)

    @property
    def low(self) -> int:
        return min(self.scores)

    @property
    def mean(self) -> float:
        return sum(self.scores) / len(self.scores)


def simulate(config: BowlingConfig) -> SimulationResult:
    """Play ``config.session.games`` complete games with seeded random bowlers.

    Raises InvalidConfiguration for a game count below 1 or a seed that
    cannot key a session.
    """
    validate_session(config.session)
    seed_mgr = SeedManager(config.session.seed)
    results: list[GameResult] = []

    for game_number in range(1, config.session.games + 1):
        seed = seed_mgr.get_game_seed(game_number)
        game_id = f"game-{config.session.seed}-{game_number:03d}"
        roll_logger = (
            RollLogger(config.session.output_dir, game_id)
            if config.session.output_dir
            else None
        )
        session = BowlingSession(
            game=config.game.build_game(),
            roller=RandomRoller(config.roller.ability_level, rng=seed_mgr.get_rng(seed)),
            roll_logger=roll_logger,
        )
        session.new_game()
        session.complete_game()
        session.finalize(extra={"seed": seed, "ability_level": config.roller.ability_level})

        frames = session.game.frames()
        results.append(
            GameResult(
                game_id=game_id,
                seed=seed,
                rolls=list(session.game.rolls),
                final_score=session.game.score,
                strikes=_count_strikes(frames),
                spares=_count_spares(frames),
                scorecard=session.scorecard(),
                log_path=roll_logger.file_path if roll_logger else None,
            )
        )
        logger.debug("%s finished with %d", game_id, session.game.score)

    return SimulationResult(games=results)


def _count_strikes(frames) -> int:
    total = 0
    for f in frames:
        if f.is_last_frame:
            total += sum((f.is_first_roll_strike, f.is_second_roll_strike, f.is_third_roll_strike))
        elif f.is_first_roll_strike:
            total += 1
    return total


def _count_spares(frames) -> int:
    total = 0
    for f in frames:
        total += f.is_second_roll_spare
        if f.is_last_frame:
            total += f.is_third_roll_spare
    return total
