################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Type definitions for intensity timelines."""

from __future__ import annotations

from intensity_timeline.timeline_types.segment import Segment
from intensity_timeline.timeline_types.segment import SegmentSpan


__all__ = [
    "Segment",
    "SegmentSpan",
]
