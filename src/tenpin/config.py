"""Bowling configuration loader."""

import yaml
from dataclasses import dataclass, field
from pathlib import Path

from tenpin.core.display import Glyphs, SlotLayout
from tenpin.core.game import Game
from tenpin.core.seed import check_seed
from tenpin.exceptions import InvalidConfiguration


@dataclass
class GameConfig:
    value_for_strike: int = 10
    number_of_frames: int = 10
    glyphs: Glyphs = field(default_factory=Glyphs)
    layout: SlotLayout = SlotLayout.BOXED

    def build_game(self) -> Game:
        return Game(
            value_for_strike=self.value_for_strike,
            number_of_frames=self.number_of_frames,
            strike_glyph=self.glyphs.strike,
            spare_glyph=self.glyphs.spare,
            zero_glyph=self.glyphs.zero,
            layout=self.layout,
        )


@dataclass
class RollerConfig:
    ability_level: float = 0.0


@dataclass
class SessionConfig:
    seed: int = 0
    games: int = 1
    output_dir: Path | None = None  # no JSONL logs when unset


@dataclass
class BowlingConfig:
    game: GameConfig = field(default_factory=GameConfig)
    roller: RollerConfig = field(default_factory=RollerConfig)
    session: SessionConfig = field(default_factory=SessionConfig)


def load_config(path: Path) -> BowlingConfig:
    """Load bowling config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return parse_config(raw)


def parse_config(raw: dict) -> BowlingConfig:
    """Build a BowlingConfig from an already-parsed mapping."""
    g = raw.get("game") or {}
    r = raw.get("roller") or {}
    s = raw.get("session") or {}

    glyphs_raw = g.get("glyphs") or {}
    glyphs = Glyphs(
        strike=str(glyphs_raw.get("strike", "X")),
        spare=str(glyphs_raw.get("spare", "/")),
        zero=str(glyphs_raw.get("zero", "-")),
    )

    layout_name = g.get("layout", SlotLayout.BOXED.value)
    try:
        layout = SlotLayout(layout_name)
    except ValueError:
        raise InvalidConfiguration(
            f"Unknown layout: {layout_name!r}. "
            f"Available: {[l.value for l in SlotLayout]}"
        ) from None

    ability = r.get("ability_level", 0.0)
    if isinstance(ability, bool) or not isinstance(ability, (int, float)) or not 0 <= ability <= 1:
        raise InvalidConfiguration(
            f"roller.ability_level must be a number between 0 and 1, got {ability!r}"
        )

    output_dir = s.get("output_dir")
    session = SessionConfig(
        seed=s.get("seed", 0),
        games=s.get("games", 1),
        output_dir=Path(output_dir) if output_dir else None,
    )
    validate_session(session)

    return BowlingConfig(
        game=GameConfig(
            value_for_strike=g.get("value_for_strike", 10),
            number_of_frames=g.get("number_of_frames", 10),
            glyphs=glyphs,
            layout=layout,
        ),
        roller=RollerConfig(ability_level=float(ability)),
        session=session,
    )


def validate_session(session: SessionConfig) -> None:
    """Check the game count and seed, however they were set."""
    games = session.games
    if isinstance(games, bool) or not isinstance(games, int) or games < 1:
        raise InvalidConfiguration(f"session.games must be a positive integer, got {games!r}")
    check_seed(session.seed)
