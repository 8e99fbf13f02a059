################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Segment types for piecewise-constant timelines."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    """Breakpoint and the value holding from it until the next breakpoint.

    Attributes:
        point: Breakpoint ordinate, finite
        value: Function value starting at the breakpoint, finite
    """

    point: float
    value: float

    def __post_init__(self) -> None:
        """Validate that both fields are finite."""
        if not math.isfinite(self.point):
            raise ValueError("point must be finite")
        if not math.isfinite(self.value):
            raise ValueError("value must be finite")

    def as_pair(self) -> list[float]:
        """Return a fresh [point, value] list."""
        return [self.point, self.value]


@dataclass(frozen=True)
class SegmentSpan:
    """Half-open interval [start, end) covered by a single segment.

    Attributes:
        start: Breakpoint where the segment begins
        end: Next breakpoint, or None if the segment is unbounded
        value: Function value over the interval
    """

    start: float
    end: float | None
    value: float

    def __post_init__(self) -> None:
        """Validate interval ordering."""
        if self.end is not None and self.end <= self.start:
            raise ValueError("end must be greater than start")

    def contains(self, point: float) -> bool:
        """Return True if the point lies inside the interval."""
        if point < self.start:
            return False
        return self.end is None or point < self.end
