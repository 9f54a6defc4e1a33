"""Game — owns a bowling game's roll history and enforces roll legality.

The roll history is the only operational state. Frames, remaining pins
and the scorecard are all derived from it by rebuilding the frame sequence
after each accepted roll.
"""

from __future__ import annotations

import decimal
import logging
import math
import numbers
from dataclasses import dataclass

from tenpin.core.display import DisplayFrame, Glyphs, SlotLayout, project
from tenpin.core.frame import Frame
from tenpin.core.sequencer import FrameSequencer, build as build_frames
from tenpin.exceptions import InvalidConfiguration, InvalidRoll

__all__ = ["Game", "ValidationResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking a roll value against the current game state."""

    legal: bool
    reason: str | None = None
    value: int | None = None


class Game:
    """A single bowler's game.

    Parameters
    ----------
    value_for_strike : int
        Pins in a full rack.
    number_of_frames : int
        Frames in a game; the last one allows bonus balls.
    strike_glyph, spare_glyph, zero_glyph : str
        Characters shown on the scorecard for marks and gutter balls.
    layout : SlotLayout
        Where a non-last strike is shown on the scorecard.
    """

    def __init__(
        self,
        value_for_strike: int = 10,
        number_of_frames: int = 10,
        strike_glyph: str = "X",
        spare_glyph: str = "/",
        zero_glyph: str = "-",
        layout: SlotLayout = SlotLayout.BOXED,
    ) -> None:
        if not _is_integer(value_for_strike) or value_for_strike < 1:
            raise InvalidConfiguration(
                f"value_for_strike must be a positive integer, got {value_for_strike!r}"
            )
        if not _is_integer(number_of_frames) or number_of_frames < 1:
            raise InvalidConfiguration(
                f"number_of_frames must be a positive integer, got {number_of_frames!r}"
            )
        self._value_for_strike = int(value_for_strike)
        self._number_of_frames = int(number_of_frames)
        self._glyphs = Glyphs(strike=strike_glyph, spare=spare_glyph, zero=zero_glyph)
        self._layout = SlotLayout(layout)

        self._rolls: list[int] = []
        self._remaining_pins: int = self._value_for_strike
        self._is_game_over: bool = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def value_for_strike(self) -> int:
        return self._value_for_strike

    @property
    def number_of_frames(self) -> int:
        return self._number_of_frames

    @property
    def glyphs(self) -> Glyphs:
        return self._glyphs

    @property
    def layout(self) -> SlotLayout:
        return self._layout

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    @property
    def rolls(self) -> tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def remaining_pins(self) -> int:
        return self._remaining_pins

    @property
    def is_game_over(self) -> bool:
        return self._is_game_over

    @property
    def score(self) -> int:
        """Running score through the newest frame, bonus pins still pending included."""
        return self._rebuild().score

    def frames(self) -> list[Frame]:
        return list(self._rebuild().frames)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def new_game(self) -> None:
        """Clear the roll history and start over."""
        self._rolls = []
        self._remaining_pins = self._value_for_strike
        self._is_game_over = False
        logger.debug("new game: %d pins, %d frames", self._value_for_strike, self._number_of_frames)

    def validate_roll(self, value) -> ValidationResult:
        """Check a roll without changing any state."""
        if self._is_game_over:
            return ValidationResult(
                legal=False,
                reason="The game has ended. No more rolls may be added.",
            )

        pins = _parse_pins(value)
        if pins is None:
            return ValidationResult(
                legal=False, reason=f"The roll value must be a whole number, got {value!r}."
            )

        if not 0 <= pins <= self._remaining_pins:
            return ValidationResult(
                legal=False,
                reason=f"The value must be between 0 and {self._remaining_pins} "
                f"for the next roll.",
            )

        return ValidationResult(legal=True, value=pins)

    def add_roll(self, value) -> int:
        """Append a roll to the history and return the accepted pin count.

        Raises InvalidRoll if the game is over, the value isn't a whole
        number, or it exceeds the pins left standing.
        """
        result = self.validate_roll(value)
        if not result.legal:
            logger.info("rejected roll %r: %s", value, result.reason)
            raise InvalidRoll(result.reason, value=value, remaining_pins=self._remaining_pins)

        self._rolls.append(result.value)
        self._rebuild()
        logger.debug(
            "roll %d: %d pins (remaining=%d, game_over=%s)",
            len(self._rolls), result.value, self._remaining_pins, self._is_game_over,
        )
        return result.value

    def process_rolls(self) -> list[DisplayFrame]:
        """Derive the scorecard from the current roll history."""
        seq = self._rebuild()
        return project(
            seq.frames,
            number_of_frames=self._number_of_frames,
            value_for_strike=self._value_for_strike,
            glyphs=self._glyphs,
            layout=self._layout,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _rebuild(self) -> FrameSequencer:
        seq = build_frames(self._rolls, self._value_for_strike, self._number_of_frames)
        self._remaining_pins = seq.remaining_pins
        self._is_game_over = seq.is_game_over
        return seq


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _parse_pins(value) -> int | None:
    """Coerce a roll value to int, or None if it isn't a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, decimal.Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return None
    if isinstance(value, numbers.Real):
        if math.isfinite(value) and float(value).is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        if math.isfinite(number) and number.is_integer():
            return int(number)
    return None
