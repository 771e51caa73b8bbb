"""Efficiency drill: deal a 14-tile hand, grade the player's discard."""

import logging
from typing import List, Optional

from mahjong_trainer.analysis.cache import BoundedCache
from mahjong_trainer.analysis.efficiency import DiscardAdvisor, DiscardFeedback
from mahjong_trainer.analysis.visibility import VisibleTiles
from mahjong_trainer.core.hand_count import HandCount, to_count
from mahjong_trainer.core.tile import Tile, TileLike, as_kind
from mahjong_trainer.core.wall import Wall
from mahjong_trainer.engine.config import TrainerConfig
from mahjong_trainer.engine.drill_logger import DrillLogger

logger = logging.getLogger(__name__)

HAND_SIZE = 14


class DrillSession:
    """One practice session; each problem is a freshly shuffled wall.

    The advisor cache lives for the whole session, so repeated or similar
    hands are cheap to grade.
    """

    def __init__(self, config: Optional[TrainerConfig] = None,
                 drill_logger: Optional[DrillLogger] = None):
        self.config = config or TrainerConfig()
        self.drill_logger = drill_logger
        self.advisor = DiscardAdvisor(self.config, BoundedCache(self.config.cache_size))
        self._seed = self.config.seed
        self.problem_number = 0
        self.hand: List[Tile] = []
        self.wall: Optional[Wall] = None

    def deal(self, tiles: Optional[List[Tile]] = None) -> List[Tile]:
        """Start a new problem, from the given tiles or a shuffled wall."""
        if tiles is None:
            seed = None if self._seed is None else self._seed + self.problem_number
            self.wall = Wall(seed)
            tiles = self.wall.deal(HAND_SIZE)
        elif len(tiles) != HAND_SIZE:
            raise ValueError(f"a drill hand needs {HAND_SIZE} tiles, got {len(tiles)}")
        self.hand = sorted(tiles)
        self.problem_number += 1
        logger.debug("problem %d dealt: %s", self.problem_number, self.hand)
        return self.hand

    @property
    def count(self) -> HandCount:
        return to_count(self.hand)

    @property
    def visible(self) -> VisibleTiles:
        return VisibleTiles(self.hand)

    def answer(self, discard: TileLike) -> DiscardFeedback:
        """Grade a discard for the current problem and log it."""
        if not self.hand:
            raise RuntimeError("no problem dealt")
        feedback = self.advisor.evaluate(self.count, as_kind(discard), self.visible)
        if self.drill_logger is not None:
            self.drill_logger.record(self.hand, feedback)
        return feedback
