"""CLI entry point: python -m tenpin {score,simulate,play}"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from tenpin.config import BowlingConfig, load_config, validate_session
from tenpin.core.roller import RandomRoller
from tenpin.exceptions import InvalidConfiguration, InvalidRoll
from tenpin.scorecard import print_scorecard, render_scorecard
from tenpin.session import BowlingSession, simulate

_HELP_TEXT = (
    "Commands: <pins> add a roll, r random roll, r<N> N random rolls, "
    "c complete game, n new game, a<level> set ability, q quit"
)


def _load(path: Path | None) -> BowlingConfig:
    if path is None:
        return BowlingConfig()
    if not path.exists():
        print(f"Error: config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    return load_config(path)


def _parse_rolls(values: list[str]) -> list[str]:
    rolls = []
    for v in values:
        rolls.extend(p for p in v.replace(",", " ").split() if p)
    return rolls


def _run_score(args, console: Console) -> int:
    config = _load(args.config)
    game = config.game.build_game()
    for raw in _parse_rolls(args.rolls):
        try:
            game.add_roll(raw)
        except InvalidRoll as exc:
            print(f"Error: roll {len(game.rolls) + 1} ({raw}): {exc}", file=sys.stderr)
            return 1
    print_scorecard(game, console=console)
    return 0


def _run_simulate(args, console: Console) -> int:
    config = _load(args.config)
    if args.games is not None:
        config.session.games = args.games
    if args.ability is not None:
        config.roller.ability_level = args.ability
    if args.seed is not None:
        config.session.seed = args.seed
    if args.output:
        config.session.output_dir = args.output

    # Validate overrides once, before any game starts.
    RandomRoller(config.roller.ability_level)
    validate_session(config.session)

    console.print(
        f"Simulating {config.session.games} game(s) "
        f"(seed={config.session.seed}, ability={config.roller.ability_level})"
    )
    result = simulate(config)

    for g in result.games:
        console.print(render_scorecard(g.scorecard, title=f"{g.game_id}  score {g.final_score}"))
        console.print(f"  strikes: {g.strikes}  spares: {g.spares}")

    console.print()
    console.print(f"High: {result.high}  Low: {result.low}  Mean: {result.mean:.1f}")
    if config.session.output_dir:
        console.print(f"Logs: {config.session.output_dir}")
    return 0


def _run_play(args, console: Console) -> int:
    config = _load(args.config)
    session = BowlingSession(
        game=config.game.build_game(),
        roller=RandomRoller(config.roller.ability_level),
    )
    session.new_game()
    console.print(_HELP_TEXT)

    while True:
        print_scorecard(session.game, console=console)
        if session.message:
            console.print(session.message, style="red" if session.is_error else "cyan")
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line in ("q", "quit"):
            break
        if line in ("", "?", "h", "help"):
            console.print(_HELP_TEXT)
        elif line == "n":
            session.new_game()
        elif line == "c":
            session.complete_game()
        elif line.startswith("r"):
            count = line[1:] or "1"
            if count.isdigit():
                session.add_random_rolls(int(count))
            else:
                console.print(f"Unknown command: {line!r}", style="red")
        elif line.startswith("a"):
            try:
                session.set_ability(float(line[1:]))
            except ValueError:
                console.print(f"Ability must be a number: {line[1:]!r}", style="red")
        else:
            session.add_roll(line)
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="tenpin",
        description="Ten-pin bowling scorer",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score a list of rolls")
    score.add_argument("rolls", nargs="+", help="Pins per roll, space or comma separated")
    score.add_argument("-c", "--config", type=Path, default=None, help="Path to YAML config file")

    sim = sub.add_parser("simulate", help="Play random games")
    sim.add_argument("config", type=Path, nargs="?", default=None, help="Path to YAML config file")
    sim.add_argument("-n", "--games", type=int, default=None, help="Number of games to play")
    sim.add_argument("--ability", type=float, default=None, help="Random bowler ability, 0 to 1")
    sim.add_argument("--seed", type=int, default=None, help="Session seed")
    sim.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Directory for JSONL game logs",
    )

    play = sub.add_parser("play", help="Interactive scorecard")
    play.add_argument("config", type=Path, nargs="?", default=None, help="Path to YAML config file")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    console = Console()
    handlers = {"score": _run_score, "simulate": _run_simulate, "play": _run_play}
    try:
        code = handlers[args.command](args, console)
    except InvalidConfiguration as exc:
        print(f"Error: {exc}", file=sys.stderr)
        code = 2
    sys.exit(code)


if __name__ == "__main__":
    main()
