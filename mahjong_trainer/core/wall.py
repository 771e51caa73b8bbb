"""Practice wall (牌山) for dealing drill problems."""

import random
from typing import List, Optional

from .tile import Tile, ALL_TILES_136


class Wall:
    """A shuffled set of 136 tiles (red fives included) for drill problems."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._build_wall()

    def _build_wall(self):
        """Build and shuffle the wall."""
        self.all_tiles: List[Tile] = list(ALL_TILES_136)
        self._rng.shuffle(self.all_tiles)
        self.live_wall = list(self.all_tiles)

    @classmethod
    def from_tiles(cls, tiles: List[Tile]) -> 'Wall':
        """Build a Wall from a predetermined tile order (first tile drawn first)."""
        wall = cls.__new__(cls)
        wall._rng = random.Random()
        wall.all_tiles = list(tiles)
        wall.live_wall = list(tiles)
        return wall

    @property
    def remaining(self) -> int:
        """Number of drawable tiles remaining."""
        return len(self.live_wall)

    @property
    def is_empty(self) -> bool:
        return len(self.live_wall) == 0

    def draw(self) -> Optional[Tile]:
        """Draw a tile from the wall."""
        if self.live_wall:
            return self.live_wall.pop(0)
        return None

    def deal(self, n: int) -> List[Tile]:
        """Draw n tiles; raises ValueError if the wall runs short."""
        if n > len(self.live_wall):
            raise ValueError(f"cannot deal {n} tiles, {len(self.live_wall)} left")
        dealt = self.live_wall[:n]
        del self.live_wall[:n]
        return dealt
