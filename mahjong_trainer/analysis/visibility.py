"""Visible-tile bookkeeping used as the availability oracle for ukeire."""

from typing import Iterable, List

from mahjong_trainer.core.hand_count import HandCount, InvalidHandError
from mahjong_trainer.core.tile import ALL_KINDS, TileKind, TileLike, as_kind


class VisibleTiles:
    """Counts every tile the player can see: own hand, discards, indicators, melds.

    Calling the object with a kind returns how many copies are still unseen
    (4 minus visible), which is what ``ukeire`` expects as availability.
    """

    def __init__(self, tiles: Iterable[TileLike] = ()):
        self._visible: List[int] = [0] * 34
        self.add(tiles)

    @classmethod
    def from_count(cls, count: HandCount) -> 'VisibleTiles':
        visible = cls()
        for kind, n in count.items():
            visible._bump(kind, n)
        return visible

    def _bump(self, kind: TileKind, n: int):
        new = self._visible[kind.index34] + n
        if new > 4:
            raise InvalidHandError(f"{new} copies of {kind.name} visible (max 4)")
        self._visible[kind.index34] = new

    def add(self, tiles: Iterable[TileLike]):
        """Mark tiles as seen; red fives count toward their plain five."""
        for t in tiles:
            self._bump(as_kind(t), 1)

    def visible(self, kind: TileKind) -> int:
        return self._visible[kind.index34]

    def remaining(self, kind: TileKind) -> int:
        return max(4 - self._visible[kind.index34], 0)

    def __call__(self, kind: TileKind) -> int:
        return self.remaining(kind)

    @property
    def total_unseen(self) -> int:
        return sum(self.remaining(k) for k in ALL_KINDS)


def hand_only_availability(count: HandCount) -> VisibleTiles:
    """Availability when nothing but the hand itself is known."""
    return VisibleTiles.from_count(count)
