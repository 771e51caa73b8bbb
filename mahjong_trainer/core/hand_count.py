"""Hand-count index: tile multiset as a kind -> count mapping."""

from collections.abc import Mapping
from typing import Iterable, Iterator, List, Tuple

from .tile import ALL_KINDS, TileKind, TileLike, as_kind


class InvalidHandError(ValueError):
    """A hand violates an engine precondition (tile total, copies per kind)."""


class HandCount(Mapping):
    """Immutable count of each tile kind in a hand.

    Iteration yields only kinds with a non-zero count, in kind order.
    Every count is at most 4. Like Counter, indexing an absent kind gives 0
    while membership and get() treat it as missing.
    """
    __slots__ = ('_counts',)

    def __init__(self, counts: Iterable[int] = ()):
        counts = tuple(counts) or (0,) * 34
        if len(counts) != 34:
            raise InvalidHandError(f"expected 34 counts, got {len(counts)}")
        for i, c in enumerate(counts):
            if c < 0 or c > 4:
                raise InvalidHandError(
                    f"{ALL_KINDS[i].name} has {c} copies (allowed 0..4)")
        self._counts: Tuple[int, ...] = counts

    @classmethod
    def from_34_array(cls, arr: List[int]) -> 'HandCount':
        return cls(arr)

    def __getitem__(self, kind: TileKind) -> int:
        return self._counts[as_kind(kind).index34]

    def get(self, kind, default=None):
        return self[kind] if kind in self else default

    def __iter__(self) -> Iterator[TileKind]:
        return (ALL_KINDS[i] for i, c in enumerate(self._counts) if c)

    def __len__(self) -> int:
        return sum(1 for c in self._counts if c)

    def __contains__(self, kind) -> bool:
        if not isinstance(kind, TileKind):
            return False
        return self._counts[kind.index34] > 0

    def __eq__(self, other):
        if isinstance(other, HandCount):
            return self._counts == other._counts
        return super().__eq__(other)

    def __hash__(self):
        return hash(self._counts)

    def __repr__(self):
        parts = [f"{k.name}x{c}" if c > 1 else k.name for k, c in self.items()]
        return f"HandCount({' '.join(parts)})"

    @property
    def total(self) -> int:
        return sum(self._counts)

    def to_34_array(self) -> List[int]:
        """Fresh mutable 34-length copy for search algorithms."""
        return list(self._counts)

    def with_added(self, kind: TileLike, n: int = 1) -> 'HandCount':
        arr = self.to_34_array()
        arr[as_kind(kind).index34] += n
        return HandCount(arr)

    def with_removed(self, kind: TileLike, n: int = 1) -> 'HandCount':
        kind = as_kind(kind)
        arr = self.to_34_array()
        if arr[kind.index34] < n:
            raise InvalidHandError(f"cannot remove {n} x {kind.name} from {self!r}")
        arr[kind.index34] -= n
        return HandCount(arr)


def to_count(tiles: Iterable[TileLike]) -> HandCount:
    """Count a tile sequence by kind. Red fives count as plain fives."""
    arr = [0] * 34
    for t in tiles:
        arr[as_kind(t).index34] += 1
    return HandCount(arr)


def require_total(count: HandCount, *expected: int) -> None:
    """Raise InvalidHandError unless the hand holds one of the expected totals."""
    if count.total not in expected:
        want = " or ".join(str(e) for e in expected)
        raise InvalidHandError(f"hand must hold {want} tiles, got {count.total}")
