"""Tests for the pathconf error hierarchy."""

from __future__ import annotations

import pytest

from pathconf.errors import (
    ConfigCoercionError,
    ConfigError,
    ConfigErrorGroup,
    ConfigParseError,
    ConfigResolutionError,
    ConfigTypeMismatchError,
    ErrorCodes,
)


class TestConfigError:
    """Tests for the ConfigError base class."""

    def test_str_includes_code(self) -> None:
        """str() renders the code and message."""
        err = ConfigError(code="SOME_CODE", message="something broke")
        assert str(err) == "[SOME_CODE] something broke"
        assert err.details == {}
        assert err.cause is None
        assert err.timestamp

    def test_cause_is_kept(self) -> None:
        """The underlying cause is kept on the error."""
        cause = ValueError("inner")
        err = ConfigError(code="X", message="outer", cause=cause)
        assert err.cause is cause


class TestResolutionError:
    """Tests for ConfigResolutionError."""

    def test_fields(self) -> None:
        """The path and reason are exposed through details."""
        err = ConfigResolutionError(["app", "port"], "not here")
        assert err.code == ErrorCodes.CONFIG_NOT_FOUND
        assert err.path == ("app", "port")
        assert err.details["reason"] == "not here"
        assert str(err) == "[CONFIG_NOT_FOUND] not here"


class TestCoercionErrors:
    """Tests for the coercion error subclasses."""

    def test_type_mismatch_names_field(self) -> None:
        """A type mismatch names the field, target and raw type."""
        err = ConfigTypeMismatchError(field="port", target="int", raw_type="bool")
        assert isinstance(err, ConfigCoercionError)
        assert err.code == ErrorCodes.CONFIG_TYPE_MISMATCH
        assert err.field == "port"
        assert err.target == "int"
        assert "port" in err.message
        assert "bool" in err.message

    @pytest.mark.parametrize("raw_type", ["int", "float32", "bool", "NoneType"])
    def test_type_mismatch_message_wording(self, raw_type: str) -> None:
        """The message reads naturally for every raw type name."""
        err = ConfigTypeMismatchError(field="port", target="str", raw_type=raw_type)
        assert f"is of type {raw_type}," in err.message
        assert " is a " not in err.message

    def test_parse_error_carries_raw_and_reason(self) -> None:
        """A parse error keeps the raw text and the reason."""
        err = ConfigParseError(field="port", target="int", raw="abc", reason="not a base-10 integer")
        assert err.code == ErrorCodes.CONFIG_PARSE_ERROR
        assert err.details["raw"] == "abc"
        assert err.details["raw_type"] == "str"
        assert "not a base-10 integer" in err.message


class TestConfigErrorGroup:
    """Tests for the combined error raised by raise_if_errors."""

    def test_joins_and_strips(self) -> None:
        """Messages are joined with newlines and outer whitespace is stripped."""
        group = ConfigErrorGroup([ValueError("  first"), ValueError("second  ")])
        assert str(group) == "first\nsecond"
        assert group.details["count"] == 2
        assert group.code == ErrorCodes.CONFIG_INVALID


class TestErrorCodes:
    """Tests for the ErrorCodes constants."""

    def test_immutable(self) -> None:
        """Assigning to ErrorCodes raises AttributeError."""
        with pytest.raises(AttributeError):
            ErrorCodes().CONFIG_INVALID = "other"  # type: ignore[misc]
