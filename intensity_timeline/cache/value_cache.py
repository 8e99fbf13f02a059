################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Bounded read-through cache for timeline point lookups.

Eviction follows insertion order: a lookup does not refresh an entry, so the
oldest inserted entry is always the first to go when the cache is full.
"""

from __future__ import annotations

import collections
import logging
import time
from dataclasses import dataclass
from typing import Callable


_LOG: logging.Logger = logging.getLogger(__name__)


class ValueCacheError(Exception):
    """Raised when cache construction parameters are invalid."""


@dataclass(frozen=True)
class CacheEntry:
    """Cached lookup result.

    Attributes:
        value: Timeline value computed for the key
        stored_at_ms: Clock reading in milliseconds when the entry was stored
    """

    value: float
    stored_at_ms: float


class ValueCache:
    """Capacity and TTL bounded mapping from query point to value."""

    def __init__(
        self,
        *,
        max_entries: int,
        ttl_millis: int,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            max_entries: Maximum number of entries held at once
            ttl_millis: Maximum entry age in milliseconds
            clock: Monotonic clock returning seconds, defaults to time.monotonic
        """
        if isinstance(max_entries, bool) or not isinstance(max_entries, int):
            raise ValueCacheError("max_entries must be an int")
        if max_entries <= 0:
            raise ValueCacheError("max_entries must be positive")
        if isinstance(ttl_millis, bool) or not isinstance(ttl_millis, int):
            raise ValueCacheError("ttl_millis must be an int")
        if ttl_millis <= 0:
            raise ValueCacheError("ttl_millis must be positive")

        self._max_entries: int = max_entries
        self._ttl_millis: int = ttl_millis
        self._clock: Callable[[], float] = clock or time.monotonic
        self._entries: collections.OrderedDict[float, CacheEntry] = (
            collections.OrderedDict()
        )

    def __len__(self) -> int:
        """Return the number of entries currently held."""
        return len(self._entries)

    def get(self, key: float) -> float | None:
        """Return the cached value, or None on a miss or an expired entry."""
        entry: CacheEntry | None = self._entries.get(key)
        if entry is None:
            return None

        age_ms: float = self._now_ms() - entry.stored_at_ms
        if age_ms > self._ttl_millis:
            _LOG.debug("Expiring cache entry %r, age %.1f ms", key, age_ms)
            del self._entries[key]
            return None

        return entry.value

    def put(self, key: float, value: float) -> None:
        """Store a value, evicting the oldest inserted entry when full."""
        if key in self._entries:
            # Re-inserting moves the key to the back of the eviction order
            del self._entries[key]
        elif len(self._entries) >= self._max_entries:
            evicted_key, _ = self._entries.popitem(last=False)
            _LOG.debug("Evicting cache entry %r", evicted_key)

        self._entries[key] = CacheEntry(value=value, stored_at_ms=self._now_ms())

    def invalidate_all(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def _now_ms(self) -> float:
        return self._clock() * 1000.0
