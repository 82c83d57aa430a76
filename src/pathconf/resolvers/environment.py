"""Resolve configuration paths from process environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from pathconf.errors import ConfigResolutionError

__all__ = ["EnvironmentResolver"]


class EnvironmentResolver:
    """Map ``["app", "one", "value"]`` to the variable ``APP_ONE_VALUE``.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``, looked up on
            every call so later changes to the environment are seen.
        separator: String placed between path segments.
    """

    def __init__(self, environ: Mapping[str, str] | None = None, separator: str = "_") -> None:
        self._environ = environ
        self._separator = separator

    def variable_name(self, path: Sequence[str]) -> str:
        return self._separator.join(path).upper()

    def __call__(self, path: Sequence[str]) -> str:
        name = self.variable_name(path)
        environ = self._environ if self._environ is not None else os.environ
        try:
            return environ[name]
        except KeyError:
            raise ConfigResolutionError(
                path, f"environment variable {name} does not exist"
            ) from None

    def __repr__(self) -> str:
        return f"EnvironmentResolver(separator={self._separator!r})"
