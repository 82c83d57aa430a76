"""PathAccessor: scoped, type-coercing configuration lookups."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pathconf.coercion import ZERO_VALUES, coerce
from pathconf.errors import ConfigCoercionError, ConfigError, ConfigErrorGroup, ConfigResolutionError
from pathconf.values import Resolver

__all__ = ["PathAccessor", "new_root"]

_logger = logging.getLogger(__name__)

T = TypeVar("T", str, bool, int, float)


def _check_segment(segment: Any, kind: str) -> str:
    if not isinstance(segment, str) or not segment:
        raise ValueError(f"{kind} must be a non-empty string, got {segment!r}")
    return segment


class PathAccessor:
    """Typed getters over a resolver, scoped to a path prefix.

    Every accessor owns its own error list. Failed lookups are recorded there
    and also raised (``get_*``) or swallowed into a zero value (``may_get_*``),
    so callers can either branch per lookup or read everything first and call
    :meth:`raise_if_errors` once.

    A single instance is not safe for concurrent use; derive one accessor per
    thread with :meth:`child` instead.
    """

    __slots__ = ("_path", "_resolver", "_errors")

    def __init__(self, path: tuple[str, ...], resolver: Resolver) -> None:
        if not path:
            raise ValueError("path must contain at least the namespace segment")
        for segment in path:
            _check_segment(segment, "path segment")
        self._path: tuple[str, ...] = tuple(path)
        self._resolver = resolver
        self._errors: list[ConfigError] = []

    @classmethod
    def root(cls, namespace: str, resolver: Resolver) -> PathAccessor:
        """Create a top-level accessor for an application namespace."""
        return cls((_check_segment(namespace, "namespace"),), resolver)

    def child(self, segment: str) -> PathAccessor:
        """Create an accessor scoped one segment deeper.

        The child shares this accessor's resolver but starts with an empty
        error list; errors recorded on either are never visible on the other.
        """
        return PathAccessor(self._path + (_check_segment(segment, "segment"),), self._resolver)

    @property
    def path(self) -> tuple[str, ...]:
        """The segment prefix applied to every field lookup."""
        return self._path

    @property
    def resolver(self) -> Resolver:
        """The resolver shared with every accessor derived from this one."""
        return self._resolver

    @property
    def errors(self) -> tuple[ConfigError, ...]:
        """Errors recorded by this accessor's getters, oldest first."""
        return tuple(self._errors)

    def has_errors(self) -> bool:
        """Whether any getter on this accessor has recorded an error."""
        return bool(self._errors)

    def raise_if_errors(self) -> None:
        """Raise a single :class:`ConfigErrorGroup` if any error was recorded.

        The group's message is every recorded error's text joined by newlines.
        """
        if not self._errors:
            return
        _logger.warning(
            "Configuration under %s has %d error(s)", ".".join(self._path), len(self._errors)
        )
        raise ConfigErrorGroup(self._errors)

    def get(self, field: str, target: type[T]) -> T:
        """Resolve ``field`` under this accessor's path and coerce it to ``target``.

        Raises:
            ConfigResolutionError: If the resolver has no value for the path.
            ConfigCoercionError: If the raw value cannot be converted.
        """
        lookup = self._path + (_check_segment(field, "field"),)
        try:
            raw = self._resolver(lookup)
        except ConfigResolutionError as exc:
            self._record(lookup, exc)
            raise
        try:
            return coerce(target, field, raw)
        except ConfigCoercionError as exc:
            self._record(lookup, exc)
            raise

    def may_get(self, field: str, target: type[T]) -> T:
        """Like :meth:`get`, but return the zero value of ``target`` on failure.

        The failure is still recorded in :attr:`errors`.
        """
        try:
            return self.get(field, target)
        except (ConfigResolutionError, ConfigCoercionError):
            return ZERO_VALUES[target]

    def get_string(self, field: str) -> str:
        """Return ``field`` as a string; only string raw values are accepted."""
        return self.get(field, str)

    def get_bool(self, field: str) -> bool:
        """Return ``field`` as a boolean, accepting yes/no style strings."""
        return self.get(field, bool)

    def get_int(self, field: str) -> int:
        """Return ``field`` as an integer, parsing base-10 strings."""
        return self.get(field, int)

    def get_float(self, field: str) -> float:
        """Return ``field`` as a float, widening ints and 32-bit floats."""
        return self.get(field, float)

    def may_get_string(self, field: str) -> str:
        """Return ``field`` as a string, or ``""`` on failure."""
        return self.may_get(field, str)

    def may_get_bool(self, field: str) -> bool:
        """Return ``field`` as a boolean, or ``False`` on failure."""
        return self.may_get(field, bool)

    def may_get_int(self, field: str) -> int:
        """Return ``field`` as an integer, or ``0`` on failure."""
        return self.may_get(field, int)

    def may_get_float(self, field: str) -> float:
        """Return ``field`` as a float, or ``0.0`` on failure."""
        return self.may_get(field, float)

    def _record(self, lookup: tuple[str, ...], error: ConfigError) -> None:
        self._errors.append(error)
        _logger.debug("Config lookup %s failed: %s", ".".join(lookup), error.code)

    def __repr__(self) -> str:
        return f"PathAccessor(path={'.'.join(self._path)!r}, errors={len(self._errors)})"


def new_root(namespace: str, resolver: Resolver) -> PathAccessor:
    """Create a top-level :class:`PathAccessor`; see :meth:`PathAccessor.root`."""
    return PathAccessor.root(namespace, resolver)
