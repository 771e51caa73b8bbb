"""Defense coaching (守備): grade a discard's safety against one opponent.

Safety is judged from what is on the table only, in order: genbutsu
(the opponent already discarded it), suji, kabe (no-chance), then the
honor/terminal fallbacks. A dangerous tile that keeps the hand tenpai is
rated as a push rather than a mistake.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Set

from mahjong_trainer.analysis.visibility import VisibleTiles
from mahjong_trainer.core.hand_count import HandCount, InvalidHandError
from mahjong_trainer.core.tile import ALL_KINDS, TileKind, TileLike, TileSuit, as_kind
from mahjong_trainer.rules.shanten import shanten

logger = logging.getLogger(__name__)

# Suited rank -> ranks whose discard makes it suji-safe (all must be discarded)
SUJI_PARTNERS = {
    1: (4,), 2: (5,), 3: (6,),
    4: (1, 7), 5: (2, 8), 6: (3, 9),
    7: (4,), 8: (5,), 9: (6,),
}


def _ryanmen_shapes(rank: int):
    """Two-sided shapes (as rank pairs) that wait on the given rank."""
    shapes = []
    if rank <= 6:
        shapes.append((rank + 1, rank + 2))
    if rank >= 4:
        shapes.append((rank - 2, rank - 1))
    return shapes


class DefenseRating(Enum):
    EXCELLENT = "excellent"    # genbutsu
    GREAT = "great"            # honor/terminal with three copies out
    GOOD = "good"              # suji, kabe or a blind yaochu discard
    AGGRESSIVE = "aggressive"  # unsafe, but keeps tenpai
    DANGEROUS = "dangerous"


class SafetyReason(Enum):
    GENBUTSU = "genbutsu"
    SUJI = "suji"
    KABE = "kabe"
    NO_INFORMATION = "no_information"
    MOSTLY_DEAD = "mostly_dead"
    LIVE_HONOR = "live_honor"
    PUSH = "push"
    UNSAFE = "unsafe"


@dataclass(frozen=True)
class DefenseFeedback:
    discard: TileKind
    rating: DefenseRating
    reason: SafetyReason

    @property
    def is_valid(self) -> bool:
        return self.rating is not DefenseRating.DANGEROUS


def _kinds(tiles: Iterable[TileLike]) -> Set[TileKind]:
    return {as_kind(t) for t in tiles}


def _suited(kind: TileKind, rank: int) -> TileKind:
    return ALL_KINDS[kind.suit * 9 + rank - 1]


def is_genbutsu(tile: TileLike, opponent_discards: Iterable[TileLike]) -> bool:
    """The opponent has already discarded this kind; red fives are plain fives."""
    return as_kind(tile) in _kinds(opponent_discards)


def is_suji(tile: TileLike, opponent_discards: Iterable[TileLike]) -> bool:
    """Safe against a ryanmen wait because its suji partners were discarded.

    1/9 need 4/6, 2/8 need 5, 3/7 need 6/4, and the middle 4/5/6 need both
    sides (nakasuji). Honors have no suji.
    """
    kind = as_kind(tile)
    if kind.suit == TileSuit.HONOR:
        return False
    discarded = _kinds(opponent_discards)
    return all(_suited(kind, r) in discarded for r in SUJI_PARTNERS[kind.rank])


def is_kabe(tile: TileLike, visible: VisibleTiles) -> bool:
    """No-chance: every ryanmen shape waiting on the tile is walled off.

    A shape is impossible once all four copies of one of its ranks are
    visible. Ranks 4-6 have two shapes, so they need two walls.
    """
    kind = as_kind(tile)
    if kind.suit == TileSuit.HONOR:
        return False
    return all(any(visible.visible(_suited(kind, r)) == 4 for r in shape)
               for shape in _ryanmen_shapes(kind.rank))


class DefenseAdvisor:
    """Rates a discard against an opponent's river and the visible tiles."""

    def evaluate(self, discard: TileLike, opponent_discards: Iterable[TileLike],
                 visible: Optional[VisibleTiles] = None, riichi: bool = False,
                 hand: Optional[HandCount] = None) -> DefenseFeedback:
        """Grade a discard's safety.

        ``visible`` counts the tiles seen on the table (rivers, dora
        indicators, open melds), not the player's own hand. ``hand`` is the
        14-tile hand before discarding; when given, an unsafe discard that
        leaves it tenpai is rated AGGRESSIVE instead of DANGEROUS.
        """
        kind = as_kind(discard)
        river = list(opponent_discards)
        if visible is None:
            visible = VisibleTiles(river)
        if hand is not None and hand[kind] == 0:
            raise InvalidHandError(f"{kind.name} is not in the hand")

        rating, reason = self._judge(kind, river, visible, riichi, hand)
        logger.debug("defensive discard %s rated %s (%s)",
                     kind.name, rating.value, reason.value)
        return DefenseFeedback(kind, rating, reason)

    def _judge(self, kind, river, visible, riichi, hand):
        if is_genbutsu(kind, river):
            return DefenseRating.EXCELLENT, SafetyReason.GENBUTSU
        if is_suji(kind, river):
            return DefenseRating.GOOD, SafetyReason.SUJI
        if is_kabe(kind, visible):
            return DefenseRating.GOOD, SafetyReason.KABE

        if kind.is_yaochu:
            seen = visible.visible(kind)
            if not river and visible.total_unseen == 136:
                return DefenseRating.GOOD, SafetyReason.NO_INFORMATION
            if seen >= 3:
                return DefenseRating.GREAT, SafetyReason.MOSTLY_DEAD
            if riichi and seen == 0:
                return DefenseRating.DANGEROUS, SafetyReason.LIVE_HONOR

        if hand is not None and shanten(hand.with_removed(kind)) == 0:
            return DefenseRating.AGGRESSIVE, SafetyReason.PUSH
        return DefenseRating.DANGEROUS, SafetyReason.UNSAFE
