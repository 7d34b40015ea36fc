"""Schema building entry points.

Example:
    ```python
    import shapecheck as sc

    signup = sc.object({
        "email": sc.string().email(),
        "age": sc.number().min(13).optional(),
        "tags": sc.array(sc.string().max(32)).max(10).optional(),
    })
    signup.validate({"email": "Ada@Example.com", "age": "36"})
    # {'email': 'ada@example.com', 'age': 36}
    ```
"""

from __future__ import annotations

from collections.abc import Mapping

from .base import Validator
from .containers import ArrayValidator, ObjectValidator
from .scalars import BooleanValidator, NumberValidator, StringValidator


def string() -> StringValidator:
    """Create a required string validator."""
    return StringValidator()


def number() -> NumberValidator:
    """Create a required number validator."""
    return NumberValidator()


def boolean() -> BooleanValidator:
    """Create a required boolean validator."""
    return BooleanValidator()


def array(item: Validator) -> ArrayValidator:
    """Create a required array validator whose elements match ``item``."""
    return ArrayValidator(item)


def object(fields: Mapping[str, Validator]) -> ObjectValidator:  # noqa: A001
    """Create a required object validator with the given members."""
    return ObjectValidator(fields)
