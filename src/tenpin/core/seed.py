"""SeedManager: per-game random seeds for a simulated bowling session.

A session seed stands for a whole night at the lanes. Each game in it is
keyed by its 1-based number, so game 3 of seed 42 always bowls the same
rolls whether the session plays three games or thirty, and replaying a
single game only needs the session seed and the game number.
"""

import hashlib
import hmac
import random

from tenpin.exceptions import InvalidConfiguration

# Session seeds are packed as a signed 64-bit HMAC key.
SEED_MIN = -(2**63)
SEED_MAX = 2**63 - 1


def check_seed(seed) -> int:
    """Return *seed* if it can key a session, else raise InvalidConfiguration."""
    if isinstance(seed, bool) or not isinstance(seed, int) or not SEED_MIN <= seed <= SEED_MAX:
        raise InvalidConfiguration(
            f"session.seed must be an integer between {SEED_MIN} and {SEED_MAX}, got {seed!r}"
        )
    return seed


class SeedManager:
    """Hands each game of a session its own seed and bowler RNG."""

    def __init__(self, session_seed: int):
        self._session_seed = check_seed(session_seed)
        self._key = session_seed.to_bytes(8, byteorder="big", signed=True)

    @property
    def session_seed(self) -> int:
        return self._session_seed

    def get_game_seed(self, game_number: int) -> int:
        """Seed for the given game of the session (game numbers start at 1)."""
        if game_number < 1:
            raise ValueError(f"game numbers start at 1, got {game_number}")
        msg = f"game:{game_number}".encode("utf-8")
        digest = hmac.new(self._key, msg, hashlib.sha256).digest()
        return int.from_bytes(digest[:8], byteorder="big")

    def get_rng(self, game_seed: int) -> random.Random:
        """A private Random for one bowler; the module-level generator is untouched."""
        return random.Random(game_seed)
