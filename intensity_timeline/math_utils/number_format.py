################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Canonical text formatting for timeline numbers."""

from __future__ import annotations

import decimal
import math
from typing import Iterable
from typing import Sequence


# Integral magnitudes at or above this bound switch to exponent notation
EXPONENT_THRESHOLD: float = 1e21

# Non-integral magnitudes below this bound keep exponent notation
PLAIN_LOWER_BOUND: float = 1e-6


def format_number(value: float) -> str:
    """Return the shortest round-trip text for a finite number.

    Integral values print without a decimal point, negative zero prints as
    "0", magnitudes from 1e-6 up to 1e21 are
    written as plain decimals, and exponents carry an explicit sign without
    zero padding.
    """
    if not math.isfinite(value):
        raise ValueError("Only finite numbers can be formatted")

    if value == 0.0:
        return "0"

    if float(value).is_integer() and abs(value) < EXPONENT_THRESHOLD:
        return str(int(value))

    text: str = repr(float(value))
    if "e" not in text:
        return text

    if PLAIN_LOWER_BOUND <= abs(value) < EXPONENT_THRESHOLD:
        # Python switches to exponents below 1e-4, JSON output only below 1e-6
        return format(decimal.Decimal(text), "f")

    mantissa, exponent = text.split("e")
    sign: str = "-" if exponent.startswith("-") else "+"
    digits: str = exponent.lstrip("+-").lstrip("0") or "0"
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]

    return f"{mantissa}e{sign}{digits}"


def format_pairs(pairs: Iterable[Sequence[float]]) -> str:
    """Return compact JSON-style text for (point, value) pairs."""
    body: str = ",".join(
        f"[{format_number(point)},{format_number(value)}]" for point, value in pairs
    )
    return f"[{body}]"
