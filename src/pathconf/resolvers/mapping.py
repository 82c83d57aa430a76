"""Resolve configuration paths from an in-memory nested mapping."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pathconf.errors import ConfigResolutionError
from pathconf.values import RawValue

__all__ = ["MappingResolver"]


class MappingResolver:
    """Walk a nested mapping one path segment at a time.

    Leaves are returned as-is; the accessor decides whether they coerce to the
    requested type. Reaching a nested mapping instead of a scalar leaf is a
    resolution failure.
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def __call__(self, path: Sequence[str]) -> RawValue:
        dotted = ".".join(path)
        current: Any = self._data
        for segment in path:
            if not isinstance(current, Mapping) or segment not in current:
                raise ConfigResolutionError(path, f"key {dotted} does not exist")
            current = current[segment]
        if isinstance(current, Mapping):
            raise ConfigResolutionError(path, f"key {dotted} is a section, not a value")
        return current
