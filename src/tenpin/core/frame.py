"""Frame — one scoring frame interpreted from up to three roll slots.

A slot holds the pins downed by a roll, or None when that roll has not been
thrown yet. A non-last frame carries its bonus rolls (the next one or two
rolls of the game) in slots 2 and 3 after a strike, or slot 3 after a spare.
The last frame owns all three of its slots outright.

Frames never validate their rolls; pin bounds are checked by Game before a
roll enters the history.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Frame"]


@dataclass(frozen=True)
class Frame:
    """Immutable scoring frame."""

    roll1: int | None = None
    roll2: int | None = None
    roll3: int | None = None
    is_last_frame: bool = False
    supporting_score: int = 0  # running score of the game before this frame
    value_for_strike: int = 10

    # ------------------------------------------------------------------
    # Scores
    # ------------------------------------------------------------------

    @property
    def score_for_frame(self) -> int:
        return sum(r for r in (self.roll1, self.roll2, self.roll3) if r is not None)

    @property
    def running_score(self) -> int:
        return self.supporting_score + self.score_for_frame

    # ------------------------------------------------------------------
    # Marks
    # ------------------------------------------------------------------

    @property
    def is_first_roll_strike(self) -> bool:
        return self.roll1 is not None and self.roll1 == self.value_for_strike

    @property
    def is_second_roll_spare(self) -> bool:
        return (
            self.roll1 is not None
            and self.roll2 is not None
            and not self.is_first_roll_strike
            and self.roll1 + self.roll2 == self.value_for_strike
        )

    @property
    def is_second_roll_strike(self) -> bool:
        """Strike on the second ball; only possible after a first-ball strike."""
        return self.is_first_roll_strike and self.roll2 == self.value_for_strike

    @property
    def is_third_roll_spare(self) -> bool:
        """Third ball clears the rack left standing by a non-strike second ball."""
        return (
            self.is_first_roll_strike
            and not self.is_second_roll_strike
            and self.roll2 is not None
            and self.roll3 is not None
            and self.roll2 + self.roll3 == self.value_for_strike
        )

    @property
    def is_third_roll_strike(self) -> bool:
        return self.roll3 == self.value_for_strike and not self.is_third_roll_spare

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    @property
    def is_complete(self) -> bool:
        """True once every roll needed to finalize this frame's score exists.

        Strikes and spares wait for their bonus rolls, in the last frame as
        everywhere else. Open frames need exactly two rolls.
        """
        if self.is_first_roll_strike:
            return self.roll2 is not None and self.roll3 is not None
        if self.is_second_roll_spare:
            return self.roll3 is not None
        return self.roll1 is not None and self.roll2 is not None

    @property
    def remaining_pins(self) -> int:
        """Pins standing for the next roll to be thrown."""
        full = self.value_for_strike
        if self.is_complete:
            return 0 if self.is_last_frame else full
        if self.roll1 is None:
            return full
        if self.is_first_roll_strike:
            # The next ball either follows a second strike (fresh rack) or
            # is the second ball at the rack left by roll2.
            if self.roll2 is None or self.roll2 == full:
                return full
            return full - self.roll2
        if self.is_second_roll_spare:
            return full
        return full - self.roll1

    @property
    def rolls(self) -> tuple[int | None, int | None, int | None]:
        return (self.roll1, self.roll2, self.roll3)

    @classmethod
    def placeholder(cls, is_last_frame: bool, value_for_strike: int = 10) -> Frame:
        """An empty frame for padding a scorecard."""
        return cls(is_last_frame=is_last_frame, value_for_strike=value_for_strike)
