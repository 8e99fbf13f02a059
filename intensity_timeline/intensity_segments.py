################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Piecewise-constant intensity timeline.

Responsibility:
    Own the canonical segment store and expose add/set mutations plus point
    and range queries.

Inputs/outputs:
    - Inputs: finite real numbers for points and amounts.
    - Outputs: values, segment spans and the canonical text form
      "[[p0,v0],[p1,v1],...]".

Determinism:
    - Each mutation compiles deltas, normalizes them into a new store and
      swaps it in with a single assignment.
    - The value cache is invalidated synchronously on every mutation.
    - Validation precedes any work, so a rejected call changes nothing.

Threading:
    - No internal locking. Callers sharing an instance across threads must
      serialize access themselves.
"""

from __future__ import annotations

import logging
from typing import Callable
from typing import Sequence

import numpy as np

from intensity_timeline.cache.value_cache import ValueCache
from intensity_timeline.config.timeline_config import TimelineConfig
from intensity_timeline.math_utils.number_format import format_pairs
from intensity_timeline.math_utils.validation import require_number
from intensity_timeline.math_utils.validation import require_range
from intensity_timeline.segments.delta_compiler import DeltaMap
from intensity_timeline.segments.delta_compiler import compile_add
from intensity_timeline.segments.delta_compiler import compile_set
from intensity_timeline.segments.normalizer import normalize
from intensity_timeline.segments.segment_store import SegmentStore
from intensity_timeline.timeline_types.segment import SegmentSpan


_LOG: logging.Logger = logging.getLogger(__name__)


class IntensitySegments:
    """Timeline of intensity values that change at discrete breakpoints."""

    def __init__(
        self,
        config: TimelineConfig | None = None,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize an empty timeline.

        Args:
            config: Timeline configuration, defaults are used when omitted
            clock: Monotonic clock in seconds used for cache expiry
        """
        self._config: TimelineConfig = config or TimelineConfig()
        self._store: SegmentStore = SegmentStore.empty()
        self._cache: ValueCache | None = None
        if self._config.cache_enabled():
            self._cache = ValueCache(
                max_entries=self._config.cache_max_entries(),
                ttl_millis=self._config.cache_ttl_millis(),
                clock=clock,
            )

    def __len__(self) -> int:
        """Return the number of stored breakpoints."""
        return len(self._store)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"IntensitySegments({self.serialize()})"

    @property
    def store(self) -> SegmentStore:
        """Return the current immutable segment store."""
        return self._store

    def add(self, from_point: float, to_point: float, amount: float) -> None:
        """Add the amount to every value in [from_point, to_point)."""
        start, end = require_range(from_point, to_point)
        delta: float = require_number(amount, "amount")

        deltas: DeltaMap = compile_add(self._store, start, end, delta)
        self._replace_store(normalize(deltas))
        _LOG.debug(
            "add [%r, %r) by %r, %d segments", start, end, delta, len(self._store)
        )

    def set(self, from_point: float, to_point: float, amount: float) -> None:
        """Override every value in [from_point, to_point) with the amount."""
        start, end = require_range(from_point, to_point)
        value: float = require_number(amount, "amount")

        deltas: DeltaMap = compile_set(self._store, start, end, value)
        self._replace_store(normalize(deltas))
        _LOG.debug(
            "set [%r, %r) to %r, %d segments", start, end, value, len(self._store)
        )

    def clear(self) -> None:
        """Reset the timeline to zero everywhere."""
        self._replace_store(SegmentStore.empty())
        _LOG.debug("Cleared timeline")

    def value_at(self, time: float) -> float:
        """Return the intensity at the given point."""
        point: float = require_number(time, "time")

        if self._cache is not None:
            cached: float | None = self._cache.get(point)
            if cached is not None:
                return cached

        value: float = self._store.value_at(point)
        if self._cache is not None:
            self._cache.put(point, value)

        return value

    def values_at(self, times: Sequence[float] | np.ndarray) -> np.ndarray:
        """Return the intensities at many points as a float64 array."""
        for index, time in enumerate(np.ravel(np.asarray(times, dtype=object))):
            require_number(time, f"times[{index}]")

        return self._store.values_at(times)

    def segment_containing(self, time: float) -> SegmentSpan | None:
        """Return the segment covering the point, or None if uncovered."""
        point: float = require_number(time, "time")
        return self._store.segment_containing(point)

    def segments_in_range(
        self, from_point: float, to_point: float
    ) -> list[list[float]]:
        """Return [point, value] pairs with points in [from_point, to_point]."""
        start, end = require_range(from_point, to_point)
        return [seg.as_pair() for seg in self._store.segments_in_range(start, end)]

    def segments(self) -> list[list[float]]:
        """Return a copy of all [point, value] pairs."""
        return self._store.as_pairs()

    def total_intensity_change(self) -> float:
        """Return the sum of absolute steps between adjacent segments."""
        return self._store.total_intensity_change()

    def serialize(self) -> str:
        """Return the canonical text form of the timeline."""
        return format_pairs(self._store.as_pairs())

    def _replace_store(self, store: SegmentStore) -> None:
        self._store = store
        if self._cache is not None:
            self._cache.invalidate_all()
