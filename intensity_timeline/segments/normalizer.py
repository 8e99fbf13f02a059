################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Accumulate point deltas into a canonical segment store."""

from __future__ import annotations

from fractions import Fraction

from intensity_timeline.math_utils.validation import InvalidRange
from intensity_timeline.segments.delta_compiler import DeltaMap
from intensity_timeline.segments.segment_store import SegmentStore
from intensity_timeline.timeline_types.segment import Segment


def accumulate(deltas: DeltaMap) -> list[Segment]:
    """Return (point, running sum) segments in ascending point order.

    The running sum is exact and is rounded to the nearest float only when a
    segment is emitted.
    """
    cumulative: Fraction = Fraction(0)
    accumulated: list[Segment] = []
    for point, delta in deltas.sorted_items():
        cumulative += delta
        try:
            value: float = float(cumulative)
        except OverflowError as exc:
            raise InvalidRange(
                f"Accumulated value at {point!r} is not finite"
            ) from exc
        accumulated.append(Segment(point, value))
    return accumulated


def normalize(deltas: DeltaMap) -> SegmentStore:
    """Return the canonical store for the accumulated deltas.

    Leading zeros are dropped, a zero following a nonzero segment is kept as
    the return-to-zero marker, and any segment repeating the value of the
    segment before it is merged away. Since the value before the first point
    is implicitly 0, the same rule drops leading zeros and collapses trailing
    zero runs to their first element.
    """
    canonical: list[Segment] = []
    previous_value: float = 0.0
    for segment in accumulate(deltas):
        if segment.value == previous_value:
            continue
        canonical.append(segment)
        previous_value = segment.value

    return SegmentStore(canonical)
