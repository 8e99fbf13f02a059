################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for intensity timelines."""

from __future__ import annotations

import os
from dataclasses import dataclass

from intensity_timeline.config.timeline_params import TimelineParams
from intensity_timeline.config.timeline_params import TimelineParamsError
from intensity_timeline.config.timeline_params import load_params_file


class TimelineConfigError(Exception):
    """Raised when timeline configuration validation fails."""


@dataclass(frozen=True)
class TimelineConfig:
    """Convenience wrapper around timeline parameters."""

    params: TimelineParams

    def __init__(self, params: TimelineParams | None = None) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params or TimelineParams.defaults())
        self.validate()

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> TimelineConfig:
        """Load and validate a configuration from a YAML file."""
        try:
            params: TimelineParams = load_params_file(path)
        except TimelineParamsError as exc:
            raise TimelineConfigError(str(exc)) from exc
        return cls(params)

    def validate(self) -> None:
        """Validate parameter invariants."""
        try:
            self.params.validate()
        except TimelineParamsError as exc:
            raise TimelineConfigError(str(exc)) from exc

    def cache_enabled(self) -> bool:
        """Return True if point lookups go through the value cache."""
        return self.params.cache.enabled

    def cache_max_entries(self) -> int:
        """Return the configured cache capacity."""
        return self.params.cache.max_entries

    def cache_ttl_millis(self) -> int:
        """Return the configured cache entry lifetime in milliseconds."""
        return self.params.cache.ttl_millis
