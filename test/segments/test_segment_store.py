################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the canonical segment store."""

from __future__ import annotations

import numpy as np
import pytest

from intensity_timeline.segments.segment_store import SegmentStore
from intensity_timeline.segments.segment_store import SegmentStoreError
from intensity_timeline.timeline_types.segment import Segment
from intensity_timeline.timeline_types.segment import SegmentSpan


def _store() -> SegmentStore:
    return SegmentStore.from_pairs([[10, -1], [20, 0], [30, -1], [40, 0]])


def test_empty_store_queries() -> None:
    """An empty store reads zero and covers nothing."""
    store: SegmentStore = SegmentStore.empty()
    assert store.is_empty()
    assert store.value_at(123.0) == 0.0
    assert store.segment_containing(123.0) is None
    assert store.segments_in_range(0.0, 100.0) == []
    assert store.total_intensity_change() == 0.0
    np.testing.assert_array_equal(store.values_at([1.0, 2.0]), [0.0, 0.0])


def test_value_at_exact_breakpoint() -> None:
    """Lookup at a breakpoint returns that segment's own value."""
    store: SegmentStore = _store()
    assert store.value_at(9.999) == 0.0
    assert store.value_at(10.0) == -1.0
    assert store.value_at(20.0) == 0.0
    assert store.value_at(29.0) == 0.0
    assert store.value_at(30.0) == -1.0
    assert store.value_at(40.0) == 0.0


def test_values_at_shape_preserved() -> None:
    """Vectorized lookup keeps the query shape."""
    store: SegmentStore = _store()
    query: np.ndarray = np.array([[5.0, 10.0], [35.0, 45.0]])
    values: np.ndarray = store.values_at(query)
    assert values.shape == (2, 2)
    np.testing.assert_array_equal(values, [[0.0, -1.0], [-1.0, 0.0]])


def test_segment_containing_bounds() -> None:
    """Span lookup returns half-open intervals."""
    store: SegmentStore = _store()
    span: SegmentSpan | None = store.segment_containing(15.0)
    assert span == SegmentSpan(start=10.0, end=20.0, value=-1.0)
    assert span is not None and span.contains(10.0) and not span.contains(20.0)
    assert store.segment_containing(40.0) is None


def test_segment_containing_open_tail() -> None:
    """A nonzero last segment is reported as unbounded."""
    store: SegmentStore = SegmentStore.from_pairs([[0, 2]])
    span: SegmentSpan | None = store.segment_containing(1e6)
    assert span == SegmentSpan(start=0.0, end=None, value=2.0)


def test_rejects_non_canonical_sequences() -> None:
    """Construction enforces the canonical invariants."""
    with pytest.raises(SegmentStoreError):
        SegmentStore.from_pairs([[10, 0], [20, 1]])
    with pytest.raises(SegmentStoreError):
        SegmentStore.from_pairs([[10, 1], [20, 1], [30, 0]])
    with pytest.raises(SegmentStoreError):
        SegmentStore.from_pairs([[20, 1], [10, 0]])
    with pytest.raises(SegmentStoreError):
        SegmentStore.from_pairs([[10, 1], [20, 0], [30, 0]])


def test_segment_rejects_non_finite() -> None:
    """Segments must hold finite numbers."""
    with pytest.raises(ValueError):
        Segment(float("nan"), 1.0)
    with pytest.raises(ValueError):
        Segment(1.0, float("inf"))


def test_store_equality_and_pairs() -> None:
    """Stores compare by content and hand out fresh pairs."""
    first: SegmentStore = _store()
    second: SegmentStore = _store()
    assert first == second
    assert hash(first) == hash(second)
    pairs: list[list[float]] = first.as_pairs()
    pairs[0][0] = 0.0
    assert first.as_pairs()[0] == [10.0, -1.0]
    assert first.points == (10.0, 20.0, 30.0, 40.0)
    assert list(first) == list(first.segments)
