"""Errors raised at the Game and RandomRoller boundaries."""

from __future__ import annotations


class TenpinError(Exception):
    """Base class for all tenpin errors."""


class InvalidRoll(TenpinError):
    """A roll was rejected. The game state is left unchanged."""

    def __init__(self, reason: str, value=None, remaining_pins: int | None = None):
        super().__init__(reason)
        self.reason = reason
        self.value = value
        self.remaining_pins = remaining_pins


class InvalidConfiguration(TenpinError):
    """A configuration value (ability level, pin count, layout...) is out of range."""
