################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Compile range operations into sparse point deltas.

Both operations re-express the current step function as a sum of deltas and
then add their own contribution, so a single normalization pass rebuilds the
canonical store.

Arithmetic:
    - Deltas are held as exact fractions, so re-deriving a store reproduces
      its float values bit for bit and summed contributions cannot overflow.

Tail policy:
    - The last segment of a working sequence contributes only +value at its
      own point. No terminating breakpoint is invented past it, so a nonzero
      tail stays open-ended.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Dict
from typing import Iterable
from typing import Sequence

from intensity_timeline.segments.segment_store import SegmentStore
from intensity_timeline.timeline_types.segment import Segment


class DeltaMap:
    """Mapping from breakpoint to the summed delta contributed there."""

    __slots__ = ("_deltas",)

    def __init__(self) -> None:
        """Initialize an empty delta map."""
        self._deltas: Dict[float, Fraction] = {}

    def __len__(self) -> int:
        """Return the number of distinct points."""
        return len(self._deltas)

    def contribute(self, point: float, delta: float) -> None:
        """Add a delta at the point, summing with earlier contributions."""
        self._deltas[point] = self._deltas.get(point, Fraction(0)) + Fraction(delta)

    def get(self, point: float) -> Fraction:
        """Return the summed delta at the point, or 0 if none was contributed."""
        return self._deltas.get(point, Fraction(0))

    def sorted_items(self) -> list[tuple[float, Fraction]]:
        """Return (point, delta) pairs in ascending point order."""
        return sorted(self._deltas.items())


def rederive_deltas(segments: Sequence[Segment], deltas: DeltaMap) -> None:
    """Contribute the deltas that reproduce a step function from scratch."""
    last_index: int = len(segments) - 1
    for index, segment in enumerate(segments):
        deltas.contribute(segment.point, segment.value)
        if index < last_index:
            deltas.contribute(segments[index + 1].point, -segment.value)


def compile_add(
    store: SegmentStore, from_point: float, to_point: float, amount: float
) -> DeltaMap:
    """Return the deltas for adding the amount over [from_point, to_point)."""
    deltas: DeltaMap = DeltaMap()
    rederive_deltas(store.segments, deltas)
    deltas.contribute(from_point, amount)
    deltas.contribute(to_point, -amount)
    return deltas


def compile_set(
    store: SegmentStore, from_point: float, to_point: float, amount: float
) -> DeltaMap:
    """Return the deltas for overriding [from_point, to_point) with the amount."""
    working: list[Segment] = build_set_sequence(
        store.segments, from_point, to_point, amount
    )
    deltas: DeltaMap = DeltaMap()
    rederive_deltas(working, deltas)
    return deltas


def build_set_sequence(
    segments: Sequence[Segment], from_point: float, to_point: float, amount: float
) -> list[Segment]:
    """Assemble the working sequence for a set operation.

    The sequence holds the untouched prefix before from_point, the new
    segment, the carry-over segment at to_point and the untouched suffix
    after to_point. Adjacent duplicates are left for the normalizer.
    """
    working: list[Segment] = [seg for seg in segments if seg.point < from_point]
    working.append(Segment(from_point, amount))
    working.append(Segment(to_point, carry_over_value(segments, to_point)))
    working.extend(seg for seg in segments if seg.point > to_point)
    return working


def carry_over_value(segments: Iterable[Segment], point: float) -> float:
    """Return the value of the last segment starting at or before the point."""
    value: float = 0.0
    for segment in segments:
        if segment.point > point:
            break
        value = segment.value
    return value
