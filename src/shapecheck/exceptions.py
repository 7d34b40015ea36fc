"""Exception hierarchy for shapecheck.

Two families of errors exist:

- ``ValidationError``: the *data* does not conform to the schema. Raised by
  ``validate`` on the first violation found; carries the path of the failing
  sub-value and a human-readable reason.
- ``SchemaError``: the *schema* itself is being misused (bad builder argument,
  a non-callable transform, a transform that returns nothing).

Example:
    ```python
    from shapecheck import number
    from shapecheck.exceptions import ErrorKind, ValidationError

    try:
        number().min(1).validate(0.5, "price")
    except ValidationError as e:
        e.kind
        # <ErrorKind.BELOW_MINIMUM: 'below_minimum'>
        e.details
        # {'path': 'price', 'message': 'Minimum of 1 required'}
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

INVALID_DATA = "Invalid Data"


class ErrorKind(Enum):
    """Discriminates the reason a value failed validation."""

    REQUIRED = "required"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_NUMBER = "invalid_number"
    INVALID_BOOLEAN = "invalid_boolean"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"
    NOT_WHITELISTED = "not_whitelisted"
    BLACKLISTED = "blacklisted"
    MISSING_REQUIRED_KEY = "missing_required_key"
    UNKNOWN_KEY_NOT_ALLOWED = "unknown_key_not_allowed"
    INVALID_EMAIL = "invalid_email"
    CUSTOM_VALIDATION_FAILURE = "custom_validation_failure"
    MAX_DEPTH_EXCEEDED = "max_depth_exceeded"


class ShapecheckError(Exception):
    """Base exception for all shapecheck errors.

    Attributes:
        message: Human-readable error message
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = details or context or {}
        self.details = self.context


class ValidationError(ShapecheckError):
    """Raised when a value does not conform to a schema.

    The exception message is always ``"Invalid Data"``; the specific reason
    and the location of the failing sub-value live in ``details``.

    Example:
        ```python
        error = ValidationError("Required", "user.name", ErrorKind.REQUIRED)
        error.to_dict()
        # {'message': 'Invalid Data',
        #  'details': {'path': 'user.name', 'message': 'Required'}}
        ```
    """

    def __init__(self, reason: str, path: str = "", kind: ErrorKind = ErrorKind.TYPE_MISMATCH):
        self.path = path
        self.reason = reason
        self.kind = kind
        super().__init__(INVALID_DATA, details={"path": path, "message": reason})

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} at '{self.path}': {self.reason}"
        return f"{self.message}: {self.reason}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to its JSON-friendly form."""
        return {"message": self.message, "details": dict(self.details)}


class SchemaError(ShapecheckError):
    """Raised when a schema is built or used incorrectly.

    Example:
        ```python
        raise SchemaError(
            "Transform must be callable",
            context={"kind": "string", "transform": "not-a-function"}
        )
        ```
    """

    pass


__all__ = [
    "INVALID_DATA",
    "ErrorKind",
    "ShapecheckError",
    "ValidationError",
    "SchemaError",
]
