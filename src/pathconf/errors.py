"""Error hierarchy for the pathconf library."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigError",
    "ConfigResolutionError",
    "ConfigCoercionError",
    "ConfigTypeMismatchError",
    "ConfigParseError",
    "ConfigErrorGroup",
    "ErrorCodes",
]


class ConfigError(Exception):
    """Base error for all pathconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigResolutionError(ConfigError):
    """Raised by a resolver when no value exists for a path."""

    def __init__(self, path: Sequence[str], reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=reason,
            details={"path": tuple(path), "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> tuple[str, ...]:
        """The full segment path that could not be resolved."""
        return self.details["path"]


class ConfigCoercionError(ConfigError):
    """Base for errors converting a resolved raw value to a target type."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        field: str,
        target: str,
        raw_type: str,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        merged = {"field": field, "target": target, "raw_type": raw_type}
        merged.update(details or {})
        super().__init__(code=code, message=message, details=merged, **kwargs)

    @property
    def field(self) -> str:
        """The field name whose value failed to coerce."""
        return self.details["field"]

    @property
    def target(self) -> str:
        """Name of the requested type."""
        return self.details["target"]


class ConfigTypeMismatchError(ConfigCoercionError):
    """Raised when the raw value's type can never satisfy the target type."""

    def __init__(self, *, field: str, target: str, raw_type: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_TYPE_MISMATCH",
            message=(
                f"value for name {field} is of type {raw_type}, "
                f"which cannot be read as {target}"
            ),
            field=field,
            target=target,
            raw_type=raw_type,
            **kwargs,
        )


class ConfigParseError(ConfigCoercionError):
    """Raised when a string raw value does not represent the target type."""

    def __init__(self, *, field: str, target: str, raw: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=f"value {raw!r} for name {field} is not a valid {target}: {reason}",
            field=field,
            target=target,
            raw_type="str",
            details={"raw": raw, "reason": reason},
            **kwargs,
        )


class ConfigErrorGroup(ConfigError):
    """Raised by ``PathAccessor.raise_if_errors`` to report every recorded error at once."""

    def __init__(self, errors: Sequence[Exception], **kwargs: Any) -> None:
        message = "\n".join(str(e) for e in errors).strip()
        super().__init__(
            code="CONFIG_INVALID",
            message=message,
            details={"count": len(errors)},
            **kwargs,
        )
        self.errors: tuple[Exception, ...] = tuple(errors)

    def __str__(self) -> str:
        return self.message


class ErrorCodes:
    """All pathconf error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            use_default()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_TYPE_MISMATCH = "CONFIG_TYPE_MISMATCH"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
