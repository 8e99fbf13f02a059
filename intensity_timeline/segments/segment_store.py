################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Canonical segment store for a piecewise-constant timeline.

Responsibility:
    Hold the ordered (point, value) breakpoints of the timeline and answer
    point and range queries against them.

Data contract:
    - Points are strictly increasing.
    - No two adjacent segments share a value.
    - No leading zero segment, at most one trailing zero segment.
    - Before the first point the timeline value is 0.

Determinism:
    - Stores are immutable; mutations produce a new store.
    - Lookups use exact float comparison, no epsilon matching.
"""

from __future__ import annotations

import bisect
from typing import Iterable
from typing import Iterator
from typing import Sequence

import numpy as np

from intensity_timeline.timeline_types.segment import Segment
from intensity_timeline.timeline_types.segment import SegmentSpan


class SegmentStoreError(Exception):
    """Raised when a segment sequence violates the canonical invariants."""


class SegmentStore:
    """Immutable ordered sequence of canonical segments."""

    __slots__ = ("_segments", "_points", "_values")

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        """Initialize the store and validate the canonical invariants."""
        ordered: tuple[Segment, ...] = tuple(segments)
        _validate_canonical(ordered)
        self._segments: tuple[Segment, ...] = ordered
        self._points: tuple[float, ...] = tuple(seg.point for seg in ordered)
        self._values: tuple[float, ...] = tuple(seg.value for seg in ordered)

    @classmethod
    def empty(cls) -> SegmentStore:
        """Return a store representing the zero function."""
        return cls(())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[float]]) -> SegmentStore:
        """Build a store from [point, value] pairs already in canonical form."""
        return cls(Segment(float(point), float(value)) for point, value in pairs)

    def __len__(self) -> int:
        """Return the number of breakpoints."""
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SegmentStore):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"SegmentStore({list(self.as_pairs())!r})"

    def is_empty(self) -> bool:
        """Return True if the store holds no breakpoints."""
        return not self._segments

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Return the stored segments in ascending point order."""
        return self._segments

    @property
    def points(self) -> tuple[float, ...]:
        """Return the breakpoints in ascending order."""
        return self._points

    def as_pairs(self) -> list[list[float]]:
        """Return a fresh list of [point, value] pairs."""
        return [seg.as_pair() for seg in self._segments]

    def value_at(self, point: float) -> float:
        """Return the value of the last segment starting at or before the point."""
        index: int = bisect.bisect_right(self._points, point) - 1
        if index < 0:
            return 0.0
        return self._values[index]

    def values_at(self, points: Sequence[float] | np.ndarray) -> np.ndarray:
        """Return the timeline values at many points at once."""
        query: np.ndarray = np.asarray(points, dtype=np.float64)
        if not self._segments:
            return np.zeros(query.shape, dtype=np.float64)

        breakpoints: np.ndarray = np.asarray(self._points, dtype=np.float64)
        # Prepend the implicit zero that holds before the first breakpoint
        values: np.ndarray = np.concatenate(
            (np.zeros(1, dtype=np.float64), np.asarray(self._values, dtype=np.float64))
        )
        indices: np.ndarray = np.searchsorted(breakpoints, query, side="right")
        return values[indices]

    def segment_containing(self, point: float) -> SegmentSpan | None:
        """Return the segment covering the point, if any.

        Points before the first breakpoint and points at or after a trailing
        zero breakpoint are not covered.
        """
        index: int = bisect.bisect_right(self._points, point) - 1
        if index < 0:
            return None

        segment: Segment = self._segments[index]
        is_last: bool = index == len(self._segments) - 1
        if is_last:
            if segment.value == 0.0:
                return None
            return SegmentSpan(start=segment.point, end=None, value=segment.value)

        return SegmentSpan(
            start=segment.point,
            end=self._points[index + 1],
            value=segment.value,
        )

    def segments_in_range(self, from_point: float, to_point: float) -> list[Segment]:
        """Return segments whose breakpoint lies in [from_point, to_point]."""
        lo: int = bisect.bisect_left(self._points, from_point)
        hi: int = bisect.bisect_right(self._points, to_point)
        return list(self._segments[lo:hi])

    def total_intensity_change(self) -> float:
        """Return the sum of absolute value steps between adjacent segments."""
        total: float = 0.0
        for prev, curr in zip(self._values, self._values[1:]):
            total += abs(curr - prev)
        return total


def _validate_canonical(segments: Sequence[Segment]) -> None:
    """Raise SegmentStoreError if the sequence is not in canonical form."""
    if not segments:
        return

    if segments[0].value == 0.0:
        raise SegmentStoreError("First segment must not be zero")

    for prev, curr in zip(segments, segments[1:]):
        if curr.point <= prev.point:
            raise SegmentStoreError("Segment points must be strictly increasing")
        if curr.value == prev.value:
            raise SegmentStoreError("Adjacent segments must not share a value")
