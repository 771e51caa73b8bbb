"""Shanten (向聴数) calculation.

Shanten = number of tile exchanges needed to reach tenpai.
0 means tenpai (one tile away from a win); the public ``shanten`` never
goes below 0. The internal ``raw_shanten`` also accepts 14 tiles and uses
-1 for a complete hand.
"""

from typing import List

from mahjong_trainer.core.hand_count import HandCount, require_total
from mahjong_trainer.core.tile import YAOCHU_INDICES
from mahjong_trainer.rules.agari import is_agari

# Worst value any real standard-form hand can take
MAX_SHANTEN = 8
# Archetype does not apply at all (e.g. seven pairs holding a quad)
NO_SHAPE = 99


def shanten(count: HandCount) -> int:
    """Minimum shanten of a 13-tile hand across all three hand shapes.

    A shape whose only wait is a fifth copy of a kind already held four
    times (karaten) is not tenpai and reports 1.
    """
    require_total(count, 13)
    tiles_34 = count.to_34_array()
    s = max(raw_shanten(tiles_34), 0)
    if s == 0 and not _has_live_wait(tiles_34):
        s = 1
    return s


def _has_live_wait(tiles_34: List[int]) -> bool:
    for i in range(34):
        if tiles_34[i] >= 4:
            continue
        tiles_34[i] += 1
        complete = is_agari(tiles_34)
        tiles_34[i] -= 1
        if complete:
            return True
    return False


def shanten_standard(count: HandCount) -> int:
    return _standard(count.to_34_array())


def shanten_chiitoi(count: HandCount) -> int:
    return _chiitoi(count.to_34_array())


def shanten_kokushi(count: HandCount) -> int:
    return _kokushi(count.to_34_array())


def raw_shanten(tiles_34: List[int]) -> int:
    """Unclamped minimum over the three shapes for a 13- or 14-tile array."""
    return min(_standard(tiles_34), _chiitoi(tiles_34), _kokushi(tiles_34))


def _standard(tiles_34: List[int]) -> int:
    """Shanten for standard form (4 mentsu + 1 jantou).

    Formula: shanten = (4 - mentsu) * 2 - 1 - partial   (head reserved)
             shanten = (4 - mentsu) * 2 - partial       (no head yet)
    Tiles left out of every group contribute nothing, which is what
    charges them as future exchanges.
    """
    total = sum(tiles_34)
    if total not in (13, 14):
        return MAX_SHANTEN

    tiles = list(tiles_34)
    best = MAX_SHANTEN

    # Try each tile as potential head
    for head in range(34):
        if tiles[head] >= 2:
            tiles[head] -= 2
            mentsu, partial = _count_mentsu_and_partial(tiles)
            best = min(best, (4 - mentsu) * 2 - 1 - partial)
            tiles[head] += 2

    # Also try without designating a head yet
    mentsu, partial = _count_mentsu_and_partial(tiles)
    best = min(best, (4 - mentsu) * 2 - partial)

    return max(best, -1)


def _count_mentsu_and_partial(tiles: List[int]) -> tuple:
    """Backtrack for the (mentsu, partial) pair that minimizes shanten."""
    best = [0, 0]  # [mentsu, partial]
    _backtrack(tiles, 0, 0, 0, best)
    return best[0], best[1]


def _backtrack(tiles: List[int], idx: int, mentsu: int, partial: int, best: List[int]):
    # Maximize mentsu*2 + partial, with at most 4 groups besides the head
    while idx < 34 and tiles[idx] == 0:
        idx += 1

    if idx >= 34:
        partial = min(partial, 4 - mentsu)
        if mentsu * 2 + partial > best[0] * 2 + best[1]:
            best[0] = mentsu
            best[1] = partial
        return

    # Prune: every remaining tile adds at most one point, and 8 is the ceiling
    bound = min(mentsu * 2 + partial + sum(tiles[idx:]), 8)
    if bound <= best[0] * 2 + best[1]:
        return

    can_add_mentsu = mentsu < 4
    can_add_partial = mentsu + partial < 4

    if can_add_mentsu:
        # Triplet
        if tiles[idx] >= 3:
            tiles[idx] -= 3
            _backtrack(tiles, idx, mentsu + 1, partial, best)
            tiles[idx] += 3

        # Run, suited only
        if idx < 27 and idx % 9 <= 6 and tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            _backtrack(tiles, idx, mentsu + 1, partial, best)
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1

    if can_add_partial:
        # Pair
        if tiles[idx] >= 2:
            tiles[idx] -= 2
            _backtrack(tiles, idx, mentsu, partial + 1, best)
            tiles[idx] += 2

        if idx < 27:
            # Adjacent (e.g. 12, 23)
            if idx % 9 <= 7 and tiles[idx + 1] >= 1:
                tiles[idx] -= 1
                tiles[idx + 1] -= 1
                _backtrack(tiles, idx, mentsu, partial + 1, best)
                tiles[idx] += 1
                tiles[idx + 1] += 1

            # Gap (e.g. 13, 24)
            if idx % 9 <= 6 and tiles[idx + 2] >= 1:
                tiles[idx] -= 1
                tiles[idx + 2] -= 1
                _backtrack(tiles, idx, mentsu, partial + 1, best)
                tiles[idx] += 1
                tiles[idx + 2] += 1

    # Leave the remaining copies of this kind out of every group
    _backtrack(tiles, idx + 1, mentsu, partial, best)


def _chiitoi(tiles_34: List[int]) -> int:
    """Shanten for seven pairs (七対子): 6 - pairs + missing kinds.

    Quads disqualify the shape entirely.
    """
    if sum(tiles_34) not in (13, 14):
        return NO_SHAPE
    if any(c >= 4 for c in tiles_34):
        return NO_SHAPE

    pairs = sum(1 for c in tiles_34 if c >= 2)
    singles = sum(1 for c in tiles_34 if c == 1)
    return 6 - pairs + max(0, 7 - pairs - singles)


def _kokushi(tiles_34: List[int]) -> int:
    """Shanten for thirteen orphans (国士無双): 13 - yaochu kinds - (1 if paired)."""
    if sum(tiles_34) not in (13, 14):
        return NO_SHAPE

    types = sum(1 for idx in YAOCHU_INDICES if tiles_34[idx] >= 1)
    has_pair = any(tiles_34[idx] >= 2 for idx in YAOCHU_INDICES)
    return 13 - types - (1 if has_pair else 0)
