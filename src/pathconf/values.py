"""Raw value model shared by resolvers and the coercion table."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Union

__all__ = ["Float32", "RawValue", "Resolver", "raw_type_name"]


class Float32(float):
    """A float that originated from a 32-bit floating point source."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Float32({float.__repr__(self)})"


RawValue = Union[str, bool, int, Float32, float]

# Maps the full segment path to a raw value, raising ConfigResolutionError when absent.
Resolver = Callable[[Sequence[str]], RawValue]


def raw_type_name(value: object) -> str:
    """Return the diagnostic type name for a raw value."""
    if isinstance(value, Float32):
        return "float32"
    if isinstance(value, float):
        return "float64"
    return type(value).__name__
