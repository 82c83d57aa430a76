"""Shared test fixtures for the pathconf test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from pathconf.errors import ConfigResolutionError


class RecordingResolver:
    """Resolver returning a fixed raw value and remembering every path it was asked for."""

    def __init__(self, value: Any = "value") -> None:
        self.value = value
        self.calls: list[tuple[str, ...]] = []

    @property
    def last_path(self) -> tuple[str, ...] | None:
        return self.calls[-1] if self.calls else None

    def __call__(self, path: Sequence[str]) -> Any:
        self.calls.append(tuple(path))
        return self.value


class FailingResolver:
    """Resolver that reports every path as missing."""

    def __init__(self, reason: str = "testerror") -> None:
        self.reason = reason
        self.calls = 0

    def __call__(self, path: Sequence[str]) -> Any:
        self.calls += 1
        raise ConfigResolutionError(path, self.reason)


@pytest.fixture
def recording_resolver() -> RecordingResolver:
    return RecordingResolver()


@pytest.fixture
def failing_resolver() -> FailingResolver:
    return FailingResolver()


@pytest.fixture
def make_resolver() -> Callable[[Any], RecordingResolver]:
    """Factory for a RecordingResolver returning the given raw value."""
    return RecordingResolver
