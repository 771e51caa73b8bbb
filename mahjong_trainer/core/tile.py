"""Tile definitions: 34 kinds for evaluation, 136 physical tiles with red fives."""

from enum import IntEnum
from typing import List, Union


class TileSuit(IntEnum):
    MAN = 0    # 萬子 characters
    PIN = 1    # 筒子 circles
    SOU = 2    # 索子 bamboo
    HONOR = 3  # 字牌 winds + dragons


SUIT_CHARS = {TileSuit.MAN: 'm', TileSuit.PIN: 'p', TileSuit.SOU: 's', TileSuit.HONOR: 'z'}
_CHAR_TO_SUIT = {c: s for s, c in SUIT_CHARS.items()}

# Red five tile IDs (in 136 encoding): copy 0 of each suited 5
RED_FIVE_MAN = 16
RED_FIVE_PIN = 52
RED_FIVE_SOU = 88
RED_DORA_IDS = {RED_FIVE_MAN, RED_FIVE_PIN, RED_FIVE_SOU}

# Yaochu (terminal + honor) tile indices in 34 encoding
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]

HONOR_KANJI = "東南西北白發中"

TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "1z", "2z", "3z", "4z", "5z", "6z", "7z",
]


class TileKind:
    """One of the 34 tile identities. Immutable, ordered suit-major then rank."""
    __slots__ = ('_index34',)

    def __init__(self, index34: int):
        if not (0 <= index34 < 34):
            raise ValueError(f"index34 must be 0..33, got {index34}")
        self._index34 = index34

    @property
    def index34(self) -> int:
        return self._index34

    @property
    def suit(self) -> TileSuit:
        return TileSuit(min(self._index34 // 9, 3))

    @property
    def rank(self) -> int:
        if self._index34 >= 27:
            return self._index34 - 27 + 1  # 1=東 .. 4=北, 5=白, 6=發, 7=中
        return self._index34 % 9 + 1

    @property
    def is_honor(self) -> bool:
        return self._index34 >= 27

    @property
    def is_terminal(self) -> bool:
        return not self.is_honor and self.rank in (1, 9)

    @property
    def is_yaochu(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def name(self) -> str:
        return TILE_NAMES_34[self._index34]

    def __repr__(self):
        return f"TileKind({self.name})"

    def __eq__(self, other):
        if isinstance(other, TileKind):
            return self._index34 == other._index34
        return NotImplemented

    def __hash__(self):
        return self._index34

    def __lt__(self, other):
        if isinstance(other, TileKind):
            return self._index34 < other._index34
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, TileKind):
            return self._index34 <= other._index34
        return NotImplemented


ALL_KINDS = [TileKind(i) for i in range(34)]


class Tile:
    """Physical tile in 136 encoding. Red fives evaluate as their plain 5."""
    __slots__ = ('_id',)

    def __init__(self, tile_id: int):
        if not (0 <= tile_id < 136):
            raise ValueError(f"tile_id must be 0..135, got {tile_id}")
        self._id = tile_id

    @property
    def id(self) -> int:
        return self._id

    @property
    def index34(self) -> int:
        return self._id // 4

    @property
    def kind(self) -> TileKind:
        return ALL_KINDS[self._id // 4]

    @property
    def suit(self) -> TileSuit:
        return self.kind.suit

    @property
    def is_red(self) -> bool:
        return self._id in RED_DORA_IDS

    @property
    def name(self) -> str:
        if self.is_red:
            return f"0{SUIT_CHARS[self.suit]}"
        return self.kind.name

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._id == other._id
        return NotImplemented

    def __hash__(self):
        return self._id

    def __lt__(self, other):
        if isinstance(other, Tile):
            return self._id < other._id
        return NotImplemented


ALL_TILES_136 = [Tile(i) for i in range(136)]

TileLike = Union[Tile, TileKind, str]


def kind_from_name(name: str) -> TileKind:
    """Resolve '5m', '0p' (red five), '7z' or a kanji honor to its kind."""
    if len(name) == 1 and name in HONOR_KANJI:
        return ALL_KINDS[27 + HONOR_KANJI.index(name)]
    if len(name) != 2 or not name[0].isdigit() or name[1] not in _CHAR_TO_SUIT:
        raise ValueError(f"unknown tile name: {name!r}")
    rank = int(name[0])
    suit = _CHAR_TO_SUIT[name[1]]
    if suit == TileSuit.HONOR:
        if not (1 <= rank <= 7):
            raise ValueError(f"honor rank must be 1..7: {name!r}")
        return ALL_KINDS[27 + rank - 1]
    if rank == 0:
        rank = 5
    return ALL_KINDS[suit * 9 + rank - 1]


def as_kind(tile: TileLike) -> TileKind:
    """Normalize a tile, kind or tile name to its evaluation kind."""
    if isinstance(tile, TileKind):
        return tile
    if isinstance(tile, Tile):
        return tile.kind
    if isinstance(tile, str):
        return kind_from_name(tile)
    raise TypeError(f"cannot interpret {tile!r} as a tile")


def parse_tiles(s: str) -> List[Tile]:
    """Parse shorthand like '123m456p0s77z' or '1m2m3m東東' into physical tiles.

    Each kind uses its lowest free tile id, so repeated kinds get distinct
    copies. '0' in a suited group is the red five; a plain 5 never takes the
    red copy while another copy is free.
    """
    tiles: List[Tile] = []
    used = set()
    numbers: List[int] = []

    def take(index34: int, red: bool):
        if red:
            candidates = [index34 * 4]
        else:
            candidates = [index34 * 4 + c for c in (1, 2, 3, 0)] if index34 * 4 in RED_DORA_IDS \
                else [index34 * 4 + c for c in range(4)]
        for tid in candidates:
            if tid not in used:
                used.add(tid)
                tiles.append(ALL_TILES_136[tid])
                return
        raise ValueError(f"more than 4 copies of {TILE_NAMES_34[index34]} in {s!r}")

    for ch in s:
        if ch.isdigit():
            numbers.append(int(ch))
        elif ch in _CHAR_TO_SUIT:
            if not numbers:
                raise ValueError(f"suit '{ch}' without ranks in {s!r}")
            for n in numbers:
                kind = kind_from_name(f"{n}{ch}")
                take(kind.index34, n == 0)
            numbers = []
        elif ch in HONOR_KANJI:
            take(27 + HONOR_KANJI.index(ch), False)
        elif ch.isspace() or ch == ',':
            continue
        else:
            raise ValueError(f"unexpected character {ch!r} in {s!r}")
    if numbers:
        raise ValueError(f"trailing ranks without suit in {s!r}")
    return tiles


def tiles_to_string(tiles) -> str:
    """Compact shorthand for a tile list, e.g. '123m55p1z'."""
    groups = {suit: [] for suit in TileSuit}
    for t in sorted(tiles, key=lambda x: as_kind(x).index34):
        if isinstance(t, Tile) and t.is_red:
            groups[t.suit].append("0")
        else:
            kind = as_kind(t)
            groups[kind.suit].append(str(kind.rank))
    return "".join("".join(ranks) + SUIT_CHARS[suit] for suit, ranks in groups.items() if ranks)
