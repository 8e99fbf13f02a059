################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of intensity-timeline
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for intensity timelines."""

from __future__ import annotations

import os
from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
from pathlib import Path
from typing import Any
from typing import Mapping

import yaml


# Enable the read-through value cache
CACHE_ENABLED: bool = True
# Maximum number of cached point lookups
CACHE_MAX_ENTRIES: int = 1000
# Maximum age of a cached lookup in milliseconds
CACHE_TTL_MILLIS: int = 5000


class TimelineParamsError(Exception):
    """Raised when timeline parameter validation fails."""


def _require_positive_int(value: Any, name: str) -> None:
    """Require a positive integer value."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TimelineParamsError(f"{name} must be an int")
    if value <= 0:
        raise TimelineParamsError(f"{name} must be positive")


def _require_bool(value: Any, name: str) -> None:
    """Require a boolean value."""
    if not isinstance(value, bool):
        raise TimelineParamsError(f"{name} must be a bool")


@dataclass(frozen=True)
class CacheParams:
    """Read-through cache parameters for point lookups."""

    # Enable the value cache
    enabled: bool = CACHE_ENABLED
    # Maximum number of cached entries, evicted in insertion order
    max_entries: int = CACHE_MAX_ENTRIES
    # Maximum entry age in milliseconds
    ttl_millis: int = CACHE_TTL_MILLIS


@dataclass(frozen=True)
class TimelineParams:
    """Complete configuration tree for an intensity timeline."""

    cache: CacheParams = field(default_factory=CacheParams)

    @classmethod
    def defaults(cls) -> TimelineParams:
        """Return the default parameter tree."""
        return cls(cache=CacheParams())

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_bool(self.cache.enabled, "cache.enabled")
        _require_positive_int(self.cache.max_entries, "cache.max_entries")
        _require_positive_int(self.cache.ttl_millis, "cache.ttl_millis")

    def replace(self, **namespace_overrides: Any) -> TimelineParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def params_from_dict(data: Mapping[str, Any]) -> TimelineParams:
    """Build parameters from a nested mapping, defaulting missing keys.

    Unknown namespaces or keys are rejected so typos do not pass silently.
    """
    if not isinstance(data, Mapping):
        raise TimelineParamsError("Timeline parameters must be a mapping")

    unknown: set[str] = set(data) - {"cache"}
    if unknown:
        raise TimelineParamsError(f"Unknown namespaces: {sorted(unknown)}")

    cache_data: Any = data.get("cache", {})
    if cache_data is None:
        cache_data = {}
    if not isinstance(cache_data, Mapping):
        raise TimelineParamsError("cache must be a mapping")

    allowed: set[str] = {item.name for item in fields(CacheParams)}
    unknown_keys: set[str] = set(cache_data) - allowed
    if unknown_keys:
        raise TimelineParamsError(f"Unknown cache keys: {sorted(unknown_keys)}")

    params: TimelineParams = TimelineParams(cache=CacheParams(**dict(cache_data)))
    params.validate()
    return params


def loads_params_yaml(text: str) -> TimelineParams:
    """Parse timeline parameters from YAML text."""
    try:
        loaded: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TimelineParamsError("Invalid YAML for timeline parameters") from exc

    if loaded is None:
        return TimelineParams.defaults()

    return params_from_dict(loaded)


def is_yaml_path(path: str | os.PathLike[str]) -> bool:
    """Return True if the path has a YAML extension."""
    suffix: str = Path(os.fspath(path)).suffix.lower()
    return suffix in {".yaml", ".yml"}


def load_params_file(path: str | os.PathLike[str]) -> TimelineParams:
    """Load timeline parameters from a YAML file."""
    if not is_yaml_path(path):
        raise TimelineParamsError("Path must end with .yaml or .yml")

    path_obj: Path = Path(os.fspath(path))
    try:
        text: str = path_obj.read_text(encoding="utf-8")
    except OSError as exc:
        raise TimelineParamsError(
            f"Failed to read timeline parameters from {path_obj}"
        ) from exc

    return loads_params_yaml(text)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            item.name: _dataclass_to_dict(getattr(value, item.name))
            for item in fields(value)
        }
    return value
