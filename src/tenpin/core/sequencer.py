"""FrameSequencer — assigns a game's rolls to scoring frames.

The sequencer walks the roll history once, left to right. Each iteration
starts a frame at the cursor and decides how many rolls the frame consumes:

    strike  -> frame slots (r, r+1, r+2), cursor advances 1
    spare   -> frame slots (r, r+1, r+2), cursor advances 2
    open    -> frame slots (r, r+1, -),   cursor advances 2
    partial -> frame slots (r, -, -),     cursor advances 1

Bonus rolls borrowed by a strike or spare stay in the history and start the
following frames, so every roll is scored exactly where bowling says it
should be. The last frame keeps all three of its slots and ends the scan.

The result is rebuilt from scratch after every roll; nothing is updated in
place, so the frames always agree with the full history.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tenpin.core.frame import Frame

__all__ = ["FrameSequencer", "build"]


@dataclass(frozen=True)
class FrameSequencer:
    """Frames derived from a roll history, plus pins available for the next roll."""

    frames: tuple[Frame, ...]
    remaining_pins: int
    value_for_strike: int = 10
    number_of_frames: int = 10

    @property
    def is_game_over(self) -> bool:
        return self.remaining_pins == 0

    @property
    def score(self) -> int:
        """Running score through the newest frame (0 before any roll)."""
        return self.frames[-1].running_score if self.frames else 0


def build(
    rolls: Sequence[int],
    value_for_strike: int = 10,
    number_of_frames: int = 10,
) -> FrameSequencer:
    """Group *rolls* into frames and compute pins available for the next roll."""
    frames: list[Frame] = []
    count = len(rolls)
    i = 0

    while i < count:
        roll = rolls[i]
        roll_next = rolls[i + 1] if i + 1 < count else None
        roll_third = rolls[i + 2] if i + 2 < count else None

        supporting = frames[-1].running_score if frames else 0
        is_last = len(frames) == number_of_frames - 1

        if roll == value_for_strike:
            slots = (roll, roll_next, roll_third)
            i = count if is_last else i + 1
        elif roll_next is not None and roll + roll_next == value_for_strike:
            slots = (roll, roll_next, roll_third)
            i += 2
        elif roll_next is not None and roll + roll_next < value_for_strike:
            slots = (roll, roll_next, None)
            i += 2
        else:
            slots = (roll, None, None)
            i += 1

        frame = Frame(
            roll1=slots[0],
            roll2=slots[1],
            roll3=slots[2],
            is_last_frame=is_last,
            supporting_score=supporting,
            value_for_strike=value_for_strike,
        )
        frames.append(frame)

        # Never read past the end of the game, even if the history does.
        if is_last and frame.is_complete:
            break

    return FrameSequencer(
        frames=tuple(frames),
        remaining_pins=_remaining_pins(frames, value_for_strike, number_of_frames),
        value_for_strike=value_for_strike,
        number_of_frames=number_of_frames,
    )


def _remaining_pins(
    frames: list[Frame], value_for_strike: int, number_of_frames: int
) -> int:
    if not frames:
        return value_for_strike
    newest = frames[-1]
    if len(frames) == number_of_frames and newest.is_complete:
        return 0
    if newest.is_complete:
        return value_for_strike
    return newest.remaining_pins
