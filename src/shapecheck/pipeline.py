"""Custom transform pipeline.

A transform is any callable taking the current value and returning either a
replacement value or a ``Failure``. Transforms attached to a validator run in
registration order after every built-in check has passed; each one receives
the previous one's output, and the first ``Failure`` stops the pipeline.

Example:
    ```python
    from shapecheck import string
    from shapecheck.pipeline import Failure

    def no_spaces(value: str) -> str | Failure:
        if " " in value:
            return Failure("Spaces are not allowed")
        return value

    slug = string().custom(no_spaces).custom(str.lower)
    slug.validate("Hello-World")
    # 'hello-world'
    ```
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Union

from .exceptions import ErrorKind, SchemaError, ValidationError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$", re.ASCII)


@dataclass(frozen=True)
class Failure:
    """Returned by a transform to reject the value it was given.

    Attributes:
        message: Reason reported in the resulting ``ValidationError``
        kind: Error kind reported (custom failure unless a built-in transform)
    """

    message: str
    kind: ErrorKind = ErrorKind.CUSTOM_VALIDATION_FAILURE


TransformOutcome = Union[Any, Failure]
Transform = Callable[[Any], TransformOutcome]


def ensure_transform(fn: Any) -> Transform:
    """Check that ``fn`` can be registered as a transform."""
    if not callable(fn):
        raise SchemaError(
            f"Custom transform must be callable, got {type(fn).__name__}",
            context={"transform": repr(fn)},
        )
    return fn


def run_transforms(
    transforms: Sequence[Transform],
    value: Any,
    path: str,
    required: bool = True,
) -> Any:
    """Fold ``value`` through ``transforms`` left to right.

    Args:
        transforms: Transforms in registration order
        value: Value produced by the built-in checks
        path: Path reported on failure
        required: Whether the owning validator is required; a required
            validator's transform may not return ``None``

    Returns:
        The last transform's output (``value`` if there are none)

    Raises:
        ValidationError: On the first ``Failure``
        SchemaError: If a required validator's transform returns ``None``
    """
    result = value
    for transform in transforms:
        outcome = transform(result)
        if isinstance(outcome, Failure):
            logger.debug(f"Transform {getattr(transform, '__name__', transform)!r} rejected value at '{path}'")
            raise ValidationError(outcome.message, path, outcome.kind)
        if outcome is None and required:
            raise SchemaError(
                "Invalid custom function",
                context={"path": path, "transform": getattr(transform, "__name__", repr(transform))},
            )
        result = outcome
    return result


def email_transform(value: str) -> str | Failure:
    """Reject malformed email addresses, lower-case well-formed ones."""
    if not EMAIL_PATTERN.fullmatch(value):
        return Failure("Invalid email address", ErrorKind.INVALID_EMAIL)
    return value.lower()
