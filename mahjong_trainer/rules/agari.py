"""Win (和了) detection - seven pairs, thirteen orphans, standard form.

All checks work on a 14-tile closed HandCount. The standard-form search
mutates a private 34-array and restores it on the way back out.
"""

from enum import Enum
from typing import List, Tuple

from mahjong_trainer.core.hand_count import HandCount, require_total
from mahjong_trainer.core.tile import YAOCHU_INDICES


class AgariShape(Enum):
    SEVEN_PAIRS = "seven_pairs"            # 七対子
    THIRTEEN_ORPHANS = "thirteen_orphans"  # 国士無双
    STANDARD = "standard"                  # 4 mentsu + 1 jantou
    INCOMPLETE = "incomplete"


# A decomposition is (head_34, mentsu_list) where mentsu_list is list of (type, index34)
# type: 'shuntsu' (run, index of lowest tile) or 'koutsu' (triplet)
Mentsu = Tuple[str, int]
Decomposition = Tuple[int, List[Mentsu]]

_YAOCHU_SET = frozenset(YAOCHU_INDICES)


def classify(count: HandCount) -> AgariShape:
    """Return which winning shape a 14-tile hand takes, first match wins."""
    require_total(count, 14)
    tiles_34 = count.to_34_array()
    if is_chiitoi_agari(tiles_34):
        return AgariShape.SEVEN_PAIRS
    if is_kokushi_agari(tiles_34):
        return AgariShape.THIRTEEN_ORPHANS
    if is_standard_agari(tiles_34):
        return AgariShape.STANDARD
    return AgariShape.INCOMPLETE


def is_complete(count: HandCount) -> bool:
    """Check if a 14-tile hand is a winning hand of any shape."""
    return classify(count) is not AgariShape.INCOMPLETE


def is_agari(tiles_34: List[int]) -> bool:
    """Unvalidated form of is_complete for search loops over 34-arrays."""
    return (is_chiitoi_agari(tiles_34) or
            is_kokushi_agari(tiles_34) or
            is_standard_agari(tiles_34))


def is_chiitoi_agari(tiles_34: List[int]) -> bool:
    """Seven distinct kinds, each held exactly twice."""
    kinds = [c for c in tiles_34 if c]
    return len(kinds) == 7 and all(c == 2 for c in kinds)


def is_kokushi_agari(tiles_34: List[int]) -> bool:
    """All 13 yaochu kinds with exactly one of them paired and nothing else."""
    pairs = 0
    for idx in range(34):
        c = tiles_34[idx]
        if idx in _YAOCHU_SET:
            if c == 0 or c > 2:
                return False
            if c == 2:
                pairs += 1
        elif c:
            return False
    return pairs == 1


def is_standard_agari(tiles_34: List[int]) -> bool:
    """Check standard form (4 mentsu + 1 jantou)."""
    if sum(tiles_34) != 14:
        return False
    tiles = list(tiles_34)
    return _can_form_melds(tiles, 0, 0, False)


def _can_form_melds(tiles: List[int], idx: int, melds: int, has_pair: bool) -> bool:
    """Carve the lowest remaining kind into a pair, triplet or run, recursively.

    The pair may be reserved at any depth; once reserved it stays reserved
    for the rest of the path.
    """
    while idx < 34 and tiles[idx] == 0:
        idx += 1

    if idx >= 34:
        return melds == 4 and has_pair

    if melds == 4 and has_pair:
        return False

    if not has_pair and tiles[idx] >= 2:
        tiles[idx] -= 2
        found = _can_form_melds(tiles, idx, melds, True)
        tiles[idx] += 2
        if found:
            return True

    if tiles[idx] >= 3 and melds < 4:
        tiles[idx] -= 3
        found = _can_form_melds(tiles, idx, melds + 1, has_pair)
        tiles[idx] += 3
        if found:
            return True

    if idx < 27 and idx % 9 <= 6 and melds < 4:
        if tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            found = _can_form_melds(tiles, idx, melds + 1, has_pair)
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1
            if found:
                return True

    # The lowest kind could not be consumed, so no partition exists.
    return False


def decompose_standard(count: HandCount) -> List[Decomposition]:
    """Find ALL standard decompositions of a 14-tile hand.

    Used by scoring code that needs to see every reading of the hand
    (e.g. 111222333m can be three triplets or three runs).
    """
    require_total(count, 14)
    tiles_34 = count.to_34_array()
    results: List[Decomposition] = []

    for head in range(34):
        if tiles_34[head] < 2:
            continue
        tiles_34[head] -= 2
        found: List[List[Mentsu]] = []
        _find_all_mentsu(tiles_34, 0, 4, [], found)
        tiles_34[head] += 2
        for mentsu_list in found:
            results.append((head, mentsu_list))

    return results


def _find_all_mentsu(tiles: List[int], start: int, needed: int,
                     current: List[Mentsu], results: List[List[Mentsu]]):
    """Recursively find all possible mentsu decompositions."""
    if needed == 0:
        if all(t == 0 for t in tiles):
            results.append(list(current))
        return

    idx = start
    while idx < 34 and tiles[idx] == 0:
        idx += 1

    if idx >= 34:
        return

    # Try koutsu (triplet) first
    if tiles[idx] >= 3:
        tiles[idx] -= 3
        current.append(('koutsu', idx))
        _find_all_mentsu(tiles, idx, needed - 1, current, results)
        current.pop()
        tiles[idx] += 3

    # Try shuntsu (sequence) - only for number tiles, never past rank 9
    if idx < 27 and idx % 9 <= 6:
        if tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            current.append(('shuntsu', idx))
            _find_all_mentsu(tiles, idx, needed - 1, current, results)
            current.pop()
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1
