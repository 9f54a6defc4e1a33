"""Terminal scorecard rendering with rich.

One column per frame. The slot row shows each frame's display slots side
by side (strikes bold red, spares bold yellow); the score row shows the
running score once a frame is final.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from tenpin.core.display import DisplayFrame, Mark
from tenpin.core.game import Game

__all__ = ["render_scorecard", "render_status", "print_scorecard"]

MARK_STYLES = {
    Mark.STRIKE: "bold red",
    Mark.SPARE: "bold yellow",
}

BLANK = " "


def _slot_text(frame: DisplayFrame) -> Text:
    used = 3 if frame.is_last_frame else 2
    text = Text()
    for i in range(used):
        if i:
            text.append("|", style="dim")
        glyph = frame.slots[i] or BLANK
        mark = frame.marks[i]
        text.append(glyph, style=MARK_STYLES.get(mark, ""))
    return text


def render_scorecard(frames: Sequence[DisplayFrame], title: str | None = None) -> Table:
    """Build a rich Table for a list of display frames."""
    table = Table(title=title, show_lines=True, title_justify="left")
    for frame in frames:
        table.add_column(str(frame.number), justify="center", min_width=5 if frame.is_last_frame else 3)
    table.add_row(*(_slot_text(f) for f in frames))
    table.add_row(*(Text(f.score or BLANK, style="bold") for f in frames))
    return table


def render_status(game: Game) -> Text:
    if game.is_game_over:
        return Text(f"Game over. Final score: {game.score}", style="bold green")
    return Text(f"Pins standing: {game.remaining_pins}    Score: {game.score}")


def print_scorecard(
    game: Game, console: Console | None = None, title: str | None = None
) -> None:
    console = console or Console()
    console.print(Group(render_scorecard(game.process_rolls(), title=title), render_status(game)))
