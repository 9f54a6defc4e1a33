"""Scoring core: frames, sequencing, display projection, game state."""

from .display import DisplayFrame, Glyphs, Mark, SlotLayout, project
from .frame import Frame
from .game import Game, ValidationResult
from .roller import RandomRoller
from .sequencer import FrameSequencer, build

__all__ = [
    "DisplayFrame",
    "Frame",
    "FrameSequencer",
    "Game",
    "Glyphs",
    "Mark",
    "RandomRoller",
    "SlotLayout",
    "ValidationResult",
    "build",
    "project",
]
