"""pathconf - Hierarchical, type-coercing configuration lookups."""

from __future__ import annotations

# Core
from pathconf.accessor import PathAccessor, new_root

# Values
from pathconf.values import Float32, RawValue, Resolver

# Coercion
from pathconf.coercion import FALSY, TRUTHY

# Resolvers
from pathconf.resolvers import EnvironmentResolver, MappingResolver

# Errors
from pathconf.errors import (
    ConfigCoercionError,
    ConfigError,
    ConfigErrorGroup,
    ConfigParseError,
    ConfigResolutionError,
    ConfigTypeMismatchError,
    ErrorCodes,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "PathAccessor",
    "new_root",
    # Values
    "Float32",
    "RawValue",
    "Resolver",
    "TRUTHY",
    "FALSY",
    # Resolvers
    "EnvironmentResolver",
    "MappingResolver",
    # Errors
    "ErrorCodes",
    "ConfigError",
    "ConfigResolutionError",
    "ConfigCoercionError",
    "ConfigTypeMismatchError",
    "ConfigParseError",
    "ConfigErrorGroup",
]
