"""Tests for the exception hierarchy and error payloads."""

import pytest

import shapecheck as sc
from shapecheck.exceptions import (
    INVALID_DATA,
    ErrorKind,
    SchemaError,
    ShapecheckError,
    ValidationError,
)


class TestShapecheckError:
    """Test the base error."""

    def test_basic(self):
        """Message without context."""
        error = ShapecheckError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.context == {}
        assert error.details == {}

    def test_details_take_precedence(self):
        """details wins over context when both are given."""
        error = ShapecheckError("Error", context={"key": "context"}, details={"key": "details"})
        assert error.context == {"key": "details"}
        assert error.details is error.context

    def test_subclasses(self):
        """Both families are catchable as the base."""
        with pytest.raises(ShapecheckError):
            raise ValidationError("Required", "", ErrorKind.REQUIRED)
        with pytest.raises(ShapecheckError):
            raise SchemaError("bad schema")


class TestValidationError:
    """Test the structured validation error."""

    def test_payload(self):
        """message is fixed, details carry path and reason."""
        error = ValidationError("Required", "user.name", ErrorKind.REQUIRED)
        assert error.message == INVALID_DATA == "Invalid Data"
        assert error.details == {"path": "user.name", "message": "Required"}
        assert error.path == "user.name"
        assert error.reason == "Required"
        assert error.kind is ErrorKind.REQUIRED

    def test_to_dict(self):
        """to_dict mirrors the JSON error shape."""
        error = ValidationError("Invalid number", "qty", ErrorKind.INVALID_NUMBER)
        assert error.to_dict() == {
            "message": "Invalid Data",
            "details": {"path": "qty", "message": "Invalid number"},
        }

    def test_str_includes_location(self):
        """str() names the path when there is one."""
        assert str(ValidationError("Required", "a.b", ErrorKind.REQUIRED)) == "Invalid Data at 'a.b': Required"
        assert str(ValidationError("Required", "", ErrorKind.REQUIRED)) == "Invalid Data: Required"

    def test_root_path_is_empty(self):
        """Top-level failures report the empty path."""
        with pytest.raises(ValidationError) as exc_info:
            sc.number().validate("x")
        assert exc_info.value.path == ""
        assert exc_info.value.details == {"path": "", "message": "Invalid number"}

    def test_fail_fast(self):
        """Only the first violation is reported."""
        schema = sc.object({"a": sc.number(), "b": sc.number()})
        with pytest.raises(ValidationError) as exc_info:
            schema.validate({"a": "x", "b": "y"})
        assert exc_info.value.path == "a"
