"""Bounded result cache owned by the analysis layer.

The rules engine is stateless; callers that evaluate the same hands over
and over (discard ranking, drills) pass one of these in explicitly.
"""

import logging
from collections import OrderedDict
from typing import Any, Callable, Hashable, Optional

logger = logging.getLogger(__name__)


class BoundedCache:
    """Insertion-ordered map that evicts its oldest entry when full."""

    def __init__(self, max_size: int = 4096):
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self.max_size = max_size
        self._data: 'OrderedDict[Hashable, Any]' = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._data

    def get(self, key: Hashable, default: Optional[Any] = None) -> Any:
        if key in self._data:
            self.hits += 1
            return self._data[key]
        self.misses += 1
        return default

    def put(self, key: Hashable, value: Any):
        if key in self._data:
            self._data[key] = value
            return
        self._data[key] = value
        if len(self._data) > self.max_size:
            evicted, _ = self._data.popitem(last=False)
            logger.debug("cache full (%d), evicted %r", self.max_size, evicted)

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        if key in self._data:
            self.hits += 1
            return self._data[key]
        self.misses += 1
        value = compute()
        self.put(key, value)
        return value

    def clear(self):
        self._data.clear()
        self.hits = 0
        self.misses = 0
