################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Piecewise-constant intensity timelines with range add and set operations."""

from __future__ import annotations

from intensity_timeline.config.timeline_config import TimelineConfig
from intensity_timeline.config.timeline_config import TimelineConfigError
from intensity_timeline.config.timeline_params import CacheParams
from intensity_timeline.config.timeline_params import TimelineParams
from intensity_timeline.intensity_segments import IntensitySegments
from intensity_timeline.math_utils.validation import InvalidRange
from intensity_timeline.math_utils.validation import InvalidType
from intensity_timeline.math_utils.validation import TimelineError
from intensity_timeline.timeline_types import Segment
from intensity_timeline.timeline_types import SegmentSpan


__all__ = [
    "CacheParams",
    "IntensitySegments",
    "InvalidRange",
    "InvalidType",
    "Segment",
    "SegmentSpan",
    "TimelineConfig",
    "TimelineConfigError",
    "TimelineError",
    "TimelineParams",
]
