################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for segment value types."""

from __future__ import annotations

import dataclasses

import pytest

from intensity_timeline.timeline_types import Segment
from intensity_timeline.timeline_types import SegmentSpan


def test_segment_is_frozen() -> None:
    """Segments cannot be mutated after construction."""
    segment: Segment = Segment(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        segment.value = 3.0  # type: ignore[misc]
    assert segment.as_pair() == [1.0, 2.0]


def test_span_rejects_inverted_bounds() -> None:
    """Span end must follow its start."""
    with pytest.raises(ValueError):
        SegmentSpan(start=5.0, end=5.0, value=1.0)


def test_unbounded_span_contains() -> None:
    """An unbounded span covers everything from its start."""
    span: SegmentSpan = SegmentSpan(start=5.0, end=None, value=1.0)
    assert span.contains(5.0)
    assert span.contains(1e300)
    assert not span.contains(4.999)
