"""Waiting tiles (待ち) and tile acceptance (受け入れ).

The engine never tracks a wall: how many copies of a kind are still
obtainable comes from a caller-supplied availability oracle.
"""

from concurrent.futures import Executor
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from mahjong_trainer.core.hand_count import HandCount, require_total
from mahjong_trainer.core.tile import ALL_KINDS, TileKind
from mahjong_trainer.rules.agari import is_agari
from mahjong_trainer.rules.shanten import raw_shanten, shanten

Availability = Callable[[TileKind], int]


@dataclass(frozen=True)
class UkeireResult:
    """Obtainable copies per accepted kind; total and waits are derived."""
    tiles: Dict[TileKind, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.tiles.values())

    @property
    def waits(self) -> List[TileKind]:
        return sorted(self.tiles)


def _completes_with(tiles_34: List[int], index34: int) -> bool:
    """Whether drawing one copy of index34 completes the hand."""
    if tiles_34[index34] >= 4:
        return False
    test = list(tiles_34)
    test[index34] += 1
    return is_agari(test)


def waits(count: HandCount, executor: Optional[Executor] = None) -> List[TileKind]:
    """All kinds that complete a 13-tile hand, in kind order.

    Each of the 34 trials is independent; pass an executor to run them
    concurrently.
    """
    require_total(count, 13)
    tiles_34 = count.to_34_array()
    indices = range(34)
    if executor is not None:
        hits = list(executor.map(_completes_with, [tiles_34] * 34, indices))
    else:
        hits = [_completes_with(tiles_34, i) for i in indices]
    return [ALL_KINDS[i] for i in indices if hits[i]]


def available_copies(availability: Availability, kind: TileKind) -> int:
    n = availability(kind)
    if not (0 <= n <= 4):
        raise ValueError(f"availability of {kind.name} must be 0..4, got {n}")
    return n


def ukeire(count: HandCount, availability: Availability) -> UkeireResult:
    """Winning kinds of a 13-tile hand with their obtainable copies.

    A wait with zero copies left is still listed; it adds nothing to the total.
    """
    return UkeireResult({kind: available_copies(availability, kind) for kind in waits(count)})


def improving_tiles(count: HandCount) -> List[TileKind]:
    """Kinds whose draw lowers the shanten of a 13-tile hand.

    For a tenpai hand these are exactly its waits. A karaten hand (shape
    complete but only a fifth copy would win) counts the draws after which
    some other discard leaves a live tenpai.
    """
    if shanten(count) == 0:
        return waits(count)
    tiles_34 = count.to_34_array()
    current = raw_shanten(tiles_34)
    if current == 0:
        return _live_tenpai_draws(count)

    result = []
    for i in range(34):
        if tiles_34[i] >= 4:
            continue
        tiles_34[i] += 1
        if raw_shanten(tiles_34) < current:
            result.append(ALL_KINDS[i])
        tiles_34[i] -= 1
    return result


def _live_tenpai_draws(count: HandCount) -> List[TileKind]:
    result = []
    for kind in ALL_KINDS:
        if count[kind] >= 4:
            continue
        drawn = count.with_added(kind)
        if any(shanten(drawn.with_removed(d)) == 0 for d in drawn if d != kind):
            result.append(kind)
    return result


def acceptance(count: HandCount, availability: Availability) -> UkeireResult:
    """Ukeire in the efficiency sense: obtainable copies of every improving kind."""
    return UkeireResult({kind: available_copies(availability, kind)
                         for kind in improving_tiles(count)})
