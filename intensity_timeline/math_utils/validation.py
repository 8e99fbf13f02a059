################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for timeline inputs.

All checks run before a mutation starts, so a rejected call never leaves a
partially updated timeline behind.
"""

from __future__ import annotations

import logging
import math
import numbers


_LOG: logging.Logger = logging.getLogger(__name__)


class TimelineError(Exception):
    """Base class for errors raised by the timeline."""


class InvalidType(TimelineError, TypeError):
    """Raised when a numeric argument is not a real number."""


class InvalidRange(TimelineError, ValueError):
    """Raised when a numeric argument is non-finite or a range is empty."""


def require_number(value: object, name: str) -> float:
    """Return the value as a finite float.

    Booleans are rejected even though Python treats them as integers.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        _LOG.debug("Rejecting %s=%r, not a number", name, value)
        raise InvalidType(f"{name} must be a number")

    number: float = float(value)
    if not math.isfinite(number):
        _LOG.debug("Rejecting %s=%r, not finite", name, value)
        raise InvalidRange(f"{name} must be a finite number")

    return number


def require_range(from_point: object, to_point: object) -> tuple[float, float]:
    """Return a validated half-open range [from_point, to_point)."""
    start: float = require_number(from_point, "from_point")
    end: float = require_number(to_point, "to_point")
    if start >= end:
        _LOG.debug("Rejecting empty range [%r, %r)", start, end)
        raise InvalidRange("from_point must be less than to_point")

    return start, end
