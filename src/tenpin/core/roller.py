"""RandomRoller — a pretend bowler with an adjustable ability level.

ability_level is the chance (0..1) of knocking down every standing pin.
When that check fails the roll falls back to a uniform pick between 0 and
the standing pins, inclusive, so even a 0.0 bowler can mark now and then.
An ability of 1.0 bowls nothing but perfect games.
"""

from __future__ import annotations

import numbers
import random

from tenpin.exceptions import InvalidConfiguration

__all__ = ["RandomRoller"]


class RandomRoller:
    """Produces plausible random rolls against a number of standing pins."""

    def __init__(self, ability_level: float = 0.0, rng: random.Random | None = None) -> None:
        self._ability_level = 0.0
        self._rng = rng or random.Random()
        self.ability_level = ability_level

    @property
    def ability_level(self) -> float:
        return self._ability_level

    @ability_level.setter
    def ability_level(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidConfiguration(
                f"ability_level must be a number, got {value!r}"
            )
        if not 0 <= value <= 1:
            raise InvalidConfiguration(
                f"ability_level must be between 0 and 1 inclusive, got {value!r}"
            )
        self._ability_level = float(value)

    def roll(self, remaining_pins: int) -> int:
        """Return pins knocked down, between 0 and *remaining_pins* inclusive."""
        if self._ability_level == 1:
            return remaining_pins
        if self._ability_level > 0 and self._rng.random() < self._ability_level:
            return remaining_pins
        return self._rng.randint(0, remaining_pins)
