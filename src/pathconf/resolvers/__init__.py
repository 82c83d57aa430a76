"""Resolver backends for PathAccessor."""

from __future__ import annotations

from pathconf.resolvers.environment import EnvironmentResolver
from pathconf.resolvers.mapping import MappingResolver

__all__ = ["EnvironmentResolver", "MappingResolver"]
