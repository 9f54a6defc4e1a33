"""DisplayProjector — turns scoring frames into scorecard display payloads.

Each DisplayFrame has three display slots and a score box. Non-last frames
use the first two slots only; the last frame uses all three. A slot shows
a glyph for a mark or a zero, the pin count otherwise, and is empty while
its roll has not been thrown. The score box stays empty until the frame's
score is final.

Two scorecard conventions exist for where a non-last strike goes:

    BOXED    [ ][X]   blank first slot, strike in the boxed second slot
    LEADING  [X][ ]   strike in the first slot, second slot blank

The last frame always shows each mark in the slot of the ball that made it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from tenpin.core.frame import Frame

__all__ = ["DisplayFrame", "Glyphs", "Mark", "SlotLayout", "project"]


class Mark(Enum):
    STRIKE = "strike"
    SPARE = "spare"


class SlotLayout(Enum):
    BOXED = "boxed"
    LEADING = "leading"


@dataclass(frozen=True)
class Glyphs:
    strike: str = "X"
    spare: str = "/"
    zero: str = "-"


@dataclass(frozen=True)
class DisplayFrame:
    """Display instructions for one scorecard frame."""

    number: int  # 1-based position on the scorecard
    slots: tuple[str, str, str]
    marks: tuple[Mark | None, Mark | None, Mark | None]
    score: str
    is_last_frame: bool = False

    def is_strike(self, slot: int) -> bool:
        return self.marks[slot] is Mark.STRIKE

    def is_spare(self, slot: int) -> bool:
        return self.marks[slot] is Mark.SPARE


def project(
    frames: Sequence[Frame],
    number_of_frames: int = 10,
    value_for_strike: int = 10,
    glyphs: Glyphs | None = None,
    layout: SlotLayout = SlotLayout.BOXED,
) -> list[DisplayFrame]:
    """Project *frames* onto a scorecard of exactly *number_of_frames* frames."""
    glyphs = glyphs or Glyphs()
    padded = list(frames)
    for i in range(len(padded), number_of_frames):
        padded.append(
            Frame.placeholder(
                is_last_frame=i == number_of_frames - 1,
                value_for_strike=value_for_strike,
            )
        )
    return [
        project_frame(frame, number, glyphs, layout)
        for number, frame in enumerate(padded, start=1)
    ]


def project_frame(
    frame: Frame,
    number: int,
    glyphs: Glyphs | None = None,
    layout: SlotLayout = SlotLayout.BOXED,
) -> DisplayFrame:
    glyphs = glyphs or Glyphs()
    if frame.is_last_frame:
        cells = _last_frame_cells(frame)
    else:
        cells = _normal_frame_cells(frame, layout)

    slots = tuple(_glyph_for(cell, glyphs) for cell in cells)
    marks = tuple(cell if isinstance(cell, Mark) else None for cell in cells)
    return DisplayFrame(
        number=number,
        slots=slots,
        marks=marks,
        score=str(frame.running_score) if frame.is_complete else "",
        is_last_frame=frame.is_last_frame,
    )


# ----------------------------------------------------------------------
# Internals
# ----------------------------------------------------------------------

# A cell is a Mark, a pin count, or None for "show nothing".
_Cell = Mark | int | None


def _normal_frame_cells(frame: Frame, layout: SlotLayout) -> tuple[_Cell, _Cell, _Cell]:
    if frame.is_first_roll_strike:
        if layout is SlotLayout.LEADING:
            return (Mark.STRIKE, None, None)
        return (None, Mark.STRIKE, None)
    second: _Cell = Mark.SPARE if frame.is_second_roll_spare else frame.roll2
    return (frame.roll1, second, None)


def _last_frame_cells(frame: Frame) -> tuple[_Cell, _Cell, _Cell]:
    first: _Cell = Mark.STRIKE if frame.is_first_roll_strike else frame.roll1

    if frame.is_second_roll_strike:
        second: _Cell = Mark.STRIKE
    elif frame.is_second_roll_spare:
        second = Mark.SPARE
    else:
        second = frame.roll2

    if frame.is_third_roll_spare:
        third: _Cell = Mark.SPARE
    elif frame.is_third_roll_strike:
        third = Mark.STRIKE
    else:
        third = frame.roll3

    return (first, second, third)


def _glyph_for(cell: _Cell, glyphs: Glyphs) -> str:
    if cell is None:
        return ""
    if cell is Mark.STRIKE:
        return glyphs.strike
    if cell is Mark.SPARE:
        return glyphs.spare
    if cell == 0:
        return glyphs.zero
    return str(cell)
