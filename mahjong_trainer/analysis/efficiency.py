"""Discard efficiency coaching (牌効率): rank discards, grade the player's choice.

Every candidate is scored by the rules engine only: shanten of the
13 tiles left, then how many obtainable tiles would improve them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from mahjong_trainer.analysis.cache import BoundedCache
from mahjong_trainer.analysis.visibility import hand_only_availability
from mahjong_trainer.core.hand_count import HandCount, InvalidHandError, require_total
from mahjong_trainer.core.tile import TileKind, TileLike, as_kind
from mahjong_trainer.engine.config import TrainerConfig
from mahjong_trainer.rules.shanten import shanten
from mahjong_trainer.rules.ukeire import (
    Availability, UkeireResult, available_copies, improving_tiles,
)

logger = logging.getLogger(__name__)


class Rating(Enum):
    EXCELLENT = "excellent"    # best shanten, maximum acceptance
    GOOD = "good"              # acceptance loss within tolerance
    SUBOPTIMAL = "suboptimal"  # shanten kept, too much acceptance lost
    BAD = "bad"                # shanten went backwards


@dataclass(frozen=True)
class DiscardOption:
    kind: TileKind
    shanten: int
    ukeire: UkeireResult

    @property
    def ukeire_total(self) -> int:
        return self.ukeire.total


@dataclass(frozen=True)
class DiscardFeedback:
    discard: DiscardOption
    rating: Rating
    best_shanten: int
    best_ukeire: int
    best_options: Tuple[DiscardOption, ...]

    @property
    def loss(self) -> int:
        """Acceptance lost versus the best discard at the same shanten."""
        if self.discard.shanten > self.best_shanten:
            return self.best_ukeire
        return self.best_ukeire - self.discard.ukeire_total

    @property
    def is_valid(self) -> bool:
        return self.rating in (Rating.EXCELLENT, Rating.GOOD)


class DiscardAdvisor:
    """Ranks the discards of a 14-tile hand by shanten, then acceptance.

    The optional cache maps a 13-tile HandCount to its (shanten, improving
    kinds) pair; availability is applied afterwards so one cache serves any
    table state.
    """

    def __init__(self, config: Optional[TrainerConfig] = None,
                 cache: Optional[BoundedCache] = None):
        self.config = config or TrainerConfig()
        self.cache = cache

    def _analyse(self, count13: HandCount) -> Tuple[int, List[TileKind]]:
        def compute():
            return shanten(count13), improving_tiles(count13)

        if self.cache is None:
            return compute()
        return self.cache.get_or_compute(count13, compute)

    def option_for(self, count14: HandCount, discard: TileLike,
                   availability: Optional[Availability] = None) -> DiscardOption:
        require_total(count14, 14)
        kind = as_kind(discard)
        if count14[kind] == 0:
            raise InvalidHandError(f"{kind.name} is not in the hand")
        if availability is None:
            availability = hand_only_availability(count14)

        count13 = count14.with_removed(kind)
        s, accepted = self._analyse(count13)
        tiles = {k: available_copies(availability, k) for k in accepted}
        return DiscardOption(kind, s, UkeireResult(tiles))

    def rank(self, count14: HandCount,
             availability: Optional[Availability] = None) -> List[DiscardOption]:
        """One option per distinct kind in the hand, best first."""
        require_total(count14, 14)
        if availability is None:
            availability = hand_only_availability(count14)
        options = [self.option_for(count14, kind, availability) for kind in count14]
        options.sort(key=lambda o: (o.shanten, -o.ukeire_total, o.kind.index34))
        return options

    def evaluate(self, count14: HandCount, discard: TileLike,
                 availability: Optional[Availability] = None) -> DiscardFeedback:
        """Grade a discard against the best available one."""
        ranked = self.rank(count14, availability)
        best = ranked[0]
        best_options = tuple(o for o in ranked
                             if o.shanten == best.shanten
                             and o.ukeire_total == best.ukeire_total)
        kind = as_kind(discard)
        chosen = next((o for o in ranked if o.kind == kind), None)
        if chosen is None:
            raise InvalidHandError(f"{kind.name} is not in the hand")

        if chosen.shanten > best.shanten:
            rating = Rating.BAD
        else:
            loss = best.ukeire_total - chosen.ukeire_total
            if loss <= 0:
                rating = Rating.EXCELLENT
            elif loss <= self.config.ukeire_tolerance:
                rating = Rating.GOOD
            else:
                rating = Rating.SUBOPTIMAL

        logger.debug("discard %s rated %s (shanten %d/%d, ukeire %d/%d)",
                     kind.name, rating.value, chosen.shanten, best.shanten,
                     chosen.ukeire_total, best.ukeire_total)
        return DiscardFeedback(chosen, rating, best.shanten, best.ukeire_total, best_options)
