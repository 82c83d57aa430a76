"""Coercion of raw resolver values into scalar target types.

Each ``coerce_*`` function takes the field name (for diagnostics) and the raw
value returned by a resolver, and either returns the converted value or raises
a :class:`~pathconf.errors.ConfigCoercionError`. The accepted raw types per
target form a closed table:

============  =====================================================
target        accepted raw values
============  =====================================================
``str``       ``str``
``bool``      ``bool``; ``str`` in :data:`TRUTHY` or :data:`FALSY`
``int``       ``int``; base-10 integer ``str``
``float``     ``float``; ``Float32``; ``int``; base-10 float ``str``
============  =====================================================

``bool`` is checked ahead of ``int`` since it is an ``int`` subclass.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any

from pathconf.errors import ConfigParseError, ConfigTypeMismatchError
from pathconf.values import Float32, raw_type_name

__all__ = [
    "TRUTHY",
    "FALSY",
    "ZERO_VALUES",
    "coerce",
    "coerce_bool",
    "coerce_float",
    "coerce_int",
    "coerce_str",
]

TRUTHY: tuple[str, ...] = ("yes", "1", "true", "y")
FALSY: tuple[str, ...] = ("no", "0", "false", "n")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def coerce_str(field: str, raw: Any) -> str:
    """Accept only values that are already strings."""
    if isinstance(raw, str):
        return raw
    raise ConfigTypeMismatchError(field=field, target="str", raw_type=raw_type_name(raw))


def coerce_bool(field: str, raw: Any) -> bool:
    """Map yes/no style strings case-insensitively; pass booleans through."""
    if isinstance(raw, str):
        lowered = raw.lower()
        if lowered in TRUTHY:
            return True
        if lowered in FALSY:
            return False
        raise ConfigParseError(
            field=field,
            target="bool",
            raw=raw,
            reason=f"expected one of {', '.join(TRUTHY + FALSY)}",
        )
    if isinstance(raw, bool):
        return raw
    raise ConfigTypeMismatchError(field=field, target="bool", raw_type=raw_type_name(raw))


def coerce_int(field: str, raw: Any) -> int:
    """Parse base-10 integer strings; pass integers through."""
    if isinstance(raw, str):
        if _INT_PATTERN.fullmatch(raw) is None:
            raise ConfigParseError(
                field=field, target="int", raw=raw, reason="not a base-10 integer"
            )
        try:
            return int(raw, 10)
        except ValueError as exc:
            # digit-count limit on str -> int conversion
            raise ConfigParseError(
                field=field, target="int", raw=raw, reason=str(exc), cause=exc
            ) from exc
    if isinstance(raw, bool):
        raise ConfigTypeMismatchError(field=field, target="int", raw_type="bool")
    if isinstance(raw, int):
        return raw
    raise ConfigTypeMismatchError(field=field, target="int", raw_type=raw_type_name(raw))


def coerce_float(field: str, raw: Any) -> float:
    """Parse float literals; widen Float32 and int values to a 64-bit float."""
    if isinstance(raw, str):
        if _FLOAT_PATTERN.fullmatch(raw) is None:
            raise ConfigParseError(
                field=field, target="float", raw=raw, reason="not a base-10 float literal"
            )
        value = float(raw)
        if math.isinf(value) and "inf" not in raw.lower():
            raise ConfigParseError(
                field=field, target="float", raw=raw, reason="value out of range"
            )
        return value
    if isinstance(raw, Float32):
        return float(raw)
    if isinstance(raw, float):
        return raw
    if isinstance(raw, bool):
        raise ConfigTypeMismatchError(field=field, target="float", raw_type="bool")
    if isinstance(raw, int):
        try:
            return float(raw)
        except OverflowError as exc:
            raise ConfigTypeMismatchError(
                field=field, target="float", raw_type="int", cause=exc
            ) from exc
    raise ConfigTypeMismatchError(field=field, target="float", raw_type=raw_type_name(raw))


_COERCERS: dict[type, Callable[[str, Any], Any]] = {
    str: coerce_str,
    bool: coerce_bool,
    int: coerce_int,
    float: coerce_float,
}

ZERO_VALUES: dict[type, Any] = {str: "", bool: False, int: 0, float: 0.0}


def coerce(target: type, field: str, raw: Any) -> Any:
    """Coerce ``raw`` to ``target``, one of ``str``, ``bool``, ``int`` or ``float``.

    Raises:
        TypeError: If ``target`` is not a supported scalar type.
        ConfigCoercionError: If ``raw`` cannot be converted.
    """
    try:
        coercer = _COERCERS[target]
    except KeyError:
        raise TypeError(f"Unsupported target type: {target!r}") from None
    return coercer(field, raw)
