"""Analysis and feedback screens rendered with Rich."""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mahjong_trainer.analysis.defense import DefenseFeedback, DefenseRating
from mahjong_trainer.analysis.efficiency import DiscardFeedback, DiscardOption, Rating
from mahjong_trainer.core.tile import Tile
from mahjong_trainer.rules.agari import AgariShape
from mahjong_trainer.rules.ukeire import UkeireResult
from mahjong_trainer.ui.i18n import t
from mahjong_trainer.ui.tile_display import (
    kind_names, tile_to_rich_text, tiles_to_rich_text, ukeire_to_rich_text,
)

RATING_STYLES = {
    Rating.EXCELLENT: "bold green",
    Rating.GOOD: "green",
    Rating.SUBOPTIMAL: "yellow",
    Rating.BAD: "bold red",
}


def render_hand(console: Console, hand: List[Tile], title: str = "",
                show_red: bool = True):
    console.print(Panel(tiles_to_rich_text(hand, show_red=show_red),
                        title=f"[bold]{title or t('label.hand')}[/bold]",
                        border_style="cyan"))


def render_shape(console: Console, shape: AgariShape):
    style = "dim" if shape is AgariShape.INCOMPLETE else "bold green"
    console.print(f"  {t('label.shape')}: [{style}]{t('shape.' + shape.value)}[/{style}]")


def render_tenpai_report(console: Console, shanten: int, result: UkeireResult):
    """Shanten, waits and ukeire of a 13-tile hand."""
    tenpai = f" ({t('label.tenpai')})" if shanten == 0 else ""
    console.print(f"  {t('label.shanten')}: [bold]{shanten}[/bold]{tenpai}")
    if not result.tiles:
        console.print(f"  {t('label.accepted')}: [dim]{t('msg.no_waits')}[/dim]")
        return
    label = t('label.waits') if shanten == 0 else t('label.accepted')
    line = Text(f"  {label}: ")
    line.append_text(ukeire_to_rich_text(result.tiles))
    line.append(f"  ({t('label.ukeire')} {result.total})", style="bold")
    console.print(line)


def render_discard_table(console: Console, options: List[DiscardOption], limit: int = 0):
    """Discard ranking: shanten, acceptance count and accepted kinds."""
    table = Table(show_header=True, header_style="bold cyan", box=None, padding=(0, 2))
    table.add_column(t('label.discard'))
    table.add_column(t('label.shanten'), justify="right")
    table.add_column(t('label.ukeire'), justify="right")
    table.add_column(t('label.accepted'))

    shown = options[:limit] if limit else options
    for opt in shown:
        table.add_row(
            tile_to_rich_text(opt.kind),
            str(opt.shanten),
            str(opt.ukeire_total),
            ukeire_to_rich_text(opt.ukeire.tiles),
        )
    console.print(table)


def feedback_message(feedback: DiscardFeedback) -> str:
    chosen = feedback.discard
    key = "feedback." + feedback.rating.value
    return t(key, ukeire=chosen.ukeire_total, loss=feedback.loss,
             best=feedback.best_shanten if feedback.rating is Rating.BAD
             else feedback.best_ukeire,
             shanten=chosen.shanten)


def render_feedback(console: Console, feedback: DiscardFeedback):
    style = RATING_STYLES[feedback.rating]
    console.print(f"  [{style}]{feedback_message(feedback)}[/{style}]")
    if feedback.rating is not Rating.EXCELLENT:
        best = kind_names(o.kind for o in feedback.best_options)
        console.print(f"  [dim]{t('feedback.best', tiles=best)}[/dim]")


DEFENSE_STYLES = {
    DefenseRating.EXCELLENT: "bold green",
    DefenseRating.GREAT: "green",
    DefenseRating.GOOD: "green",
    DefenseRating.AGGRESSIVE: "bold yellow",
    DefenseRating.DANGEROUS: "bold red",
}


def render_defense_feedback(console: Console, feedback: DefenseFeedback):
    style = DEFENSE_STYLES[feedback.rating]
    line = Text("  ")
    line.append_text(tile_to_rich_text(feedback.discard))
    line.append(f"  {t('label.rating')}: ")
    line.append(t('rating.' + feedback.rating.value), style=style)
    console.print(line)
    console.print(f"  [{style}]{t('defense.' + feedback.reason.value)}[/{style}]")
