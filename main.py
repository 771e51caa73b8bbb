#!/usr/bin/env python3
"""Mahjong Efficiency Trainer - Terminal CLI"""

import argparse
import logging
import sys

from rich.console import Console
from rich.panel import Panel

from mahjong_trainer.analysis.cache import BoundedCache
from mahjong_trainer.analysis.defense import DefenseAdvisor
from mahjong_trainer.analysis.efficiency import DiscardAdvisor
from mahjong_trainer.analysis.visibility import VisibleTiles
from mahjong_trainer.core.hand_count import InvalidHandError, to_count
from mahjong_trainer.core.tile import kind_from_name, parse_tiles
from mahjong_trainer.engine.config import TrainerConfig
from mahjong_trainer.engine.drill import DrillSession
from mahjong_trainer.engine.drill_logger import DrillLogger
from mahjong_trainer.rules.agari import classify
from mahjong_trainer.rules.shanten import shanten
from mahjong_trainer.rules.ukeire import acceptance
from mahjong_trainer.ui.i18n import t, set_language
from mahjong_trainer.ui.report import (
    render_defense_feedback, render_discard_table, render_feedback, render_hand,
    render_shape, render_tenpai_report,
)

console = Console()


def analyze(config: TrainerConfig, hand_str: str, seen_str: str = "") -> int:
    """Print the analysis of a 13- or 14-tile hand."""
    hand = parse_tiles(hand_str)
    count = to_count(hand)
    visible = VisibleTiles(hand)
    if seen_str:
        visible.add(parse_tiles(seen_str))

    render_hand(console, sorted(hand), show_red=config.use_red_fives)
    if count.total == 13:
        render_tenpai_report(console, shanten(count), acceptance(count, visible))
    elif count.total == 14:
        render_shape(console, classify(count))
        advisor = DiscardAdvisor(config, BoundedCache(config.cache_size))
        render_discard_table(console, advisor.rank(count, visible))
    else:
        raise InvalidHandError(f"hand must hold 13 or 14 tiles, got {count.total}")
    return 0


def defend(discard: str, river_str: str, seen_str: str = "", riichi: bool = False,
           hand_str: str = "") -> int:
    """Rate how safe a discard is against one opponent."""
    river = parse_tiles(river_str)
    visible = VisibleTiles(river)
    if seen_str:
        visible.add(parse_tiles(seen_str))
    hand = to_count(parse_tiles(hand_str)) if hand_str else None

    if river:
        render_hand(console, river, t('label.opponent_discards'))
    feedback = DefenseAdvisor().evaluate(discard, river, visible, riichi, hand)
    render_defense_feedback(console, feedback)
    return 0


def drill(config: TrainerConfig) -> int:
    """Interactive efficiency drill."""
    drill_logger = DrillLogger(config.to_dict(), config.log_dir)
    session = DrillSession(config, drill_logger)

    console.print(Panel(f"[bold cyan]{t('label.title')}[/bold cyan]",
                        border_style="cyan", padding=(1, 4)))
    try:
        while True:
            hand = session.deal()
            console.print()
            render_hand(console, hand, t('label.problem', n=session.problem_number),
                        show_red=config.use_red_fives)

            while True:
                raw = console.input(f"  {t('prompt.discard')} ").strip()
                if raw.lower() in ("q", "quit", "exit"):
                    return 0
                try:
                    kind = kind_from_name(raw)
                    if session.count[kind] == 0:
                        raise ValueError(raw)
                except ValueError:
                    console.print(f"  [red]{t('prompt.invalid')}[/red]")
                    continue
                break

            feedback = session.answer(kind)
            render_feedback(console, feedback)
            render_discard_table(console, session.advisor.rank(session.count, session.visible),
                                 limit=5)
    except (KeyboardInterrupt, EOFError):
        return 0
    finally:
        if drill_logger.problems:
            summary = drill_logger.summary
            console.print(f"\n  {t('msg.summary', n=summary['answered'], ratings=summary['ratings'])}")
            path = drill_logger.save()
            console.print(f"  [dim]{t('msg.log_saved', path=path)}[/dim]")
        console.print(f"  {t('msg.goodbye')}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Riichi mahjong hand-efficiency trainer")
    parser.add_argument("--lang", choices=["en", "ja"], default="en")
    parser.add_argument("--no-red", action="store_true", help="show red fives as plain fives")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="analyze a 13- or 14-tile hand")
    p_analyze.add_argument("hand", help="e.g. 123m456p789s1122z")
    p_analyze.add_argument("--seen", default="", help="other visible tiles (discards, dora)")

    p_defend = sub.add_parser("defend", help="rate the safety of a discard")
    p_defend.add_argument("tile", help="the tile to discard, e.g. 4m")
    p_defend.add_argument("--discards", default="", help="the opponent's discards")
    p_defend.add_argument("--seen", default="", help="other visible tiles on the table")
    p_defend.add_argument("--riichi", action="store_true", help="the opponent has declared riichi")
    p_defend.add_argument("--hand", default="", help="your 14-tile hand, to judge pushing")

    p_drill = sub.add_parser("drill", help="interactive discard drill")
    p_drill.add_argument("--seed", type=int, default=None)
    p_drill.add_argument("--tolerance", type=int, default=2,
                         help="acceptance loss still rated good")
    p_drill.add_argument("--log-dir", default=None)
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    set_language(args.lang)

    config = TrainerConfig(
        use_red_fives=not args.no_red,
        language=args.lang,
        seed=getattr(args, "seed", None),
        ukeire_tolerance=getattr(args, "tolerance", 2),
        log_dir=getattr(args, "log_dir", None),
    )

    try:
        if args.command == "analyze":
            return analyze(config, args.hand, args.seen)
        if args.command == "defend":
            return defend(args.tile, args.discards, args.seen, args.riichi, args.hand)
        return drill(config)
    except (InvalidHandError, ValueError) as e:
        console.print(f"  [red]{e}[/red]")
        return 2


if __name__ == "__main__":
    sys.exit(main())
