"""Validator base class and the fluent setters shared across kinds.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, ClassVar, NoReturn, TypeVar

from .config import Kind, ValidatorConfig
from .context import ValidationContext
from .exceptions import ErrorKind, SchemaError, ValidationError
from .pipeline import Transform, ensure_transform, run_transforms

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="Validator")


class Validator(ABC):
    """Base class for every validator kind.

    A validator is a handle over a ``ValidatorConfig``. Handles obtained via
    ``optional()`` and ``required()`` share their config with the handle they
    came from, so configuration applied through one is seen by all.

    Subclasses implement ``_check`` with the kind-specific coercion, type,
    range and structural checks; presence handling and the custom pipeline
    live here.
    """

    kind: ClassVar[Kind]

    def __init__(self, config: ValidatorConfig | None = None):
        """Initialize the validator.

        Args:
            config: Existing configuration to share (creates a new one if None)
        """
        if config is None:
            config = ValidatorConfig(kind=self.kind)
        elif config.kind is not self.kind:
            raise SchemaError(
                f"{type(self).__name__} cannot share a '{config.kind.value}' configuration",
                context={"expected": self.kind.value, "actual": config.kind.value},
            )
        self.config = config

    @property
    def is_required(self) -> bool:
        """Whether an absent value is rejected."""
        return self.config.required

    def optional(self: V) -> V:
        """Return a handle that accepts an absent value.

        The returned handle shares this validator's configuration, so this
        handle becomes optional as well.
        """
        self.config.required = False
        return type(self)(config=self.config)

    def required(self: V) -> V:
        """Return a handle that rejects an absent value (inverse of ``optional``)."""
        self.config.required = True
        return type(self)(config=self.config)

    def custom(self: V, transform: Transform) -> V:
        """Append a transform to the custom pipeline (fluent API).

        Args:
            transform: Callable returning a replacement value or a ``Failure``

        Returns:
            Self for chaining
        """
        self.config.transforms.append(ensure_transform(transform))
        return self

    def validate(self, value: Any = None, path: str = "", context: ValidationContext | None = None) -> Any:
        """Validate a value, returning its normalized form.

        Args:
            value: Value to validate (``None`` means absent)
            path: Location of ``value`` within the root input
            context: Recursion state (created for top-level calls)

        Returns:
            The coerced value after the custom pipeline, or ``None`` when an
            optional validator receives an absent value

        Raises:
            ValidationError: On the first violation found
        """
        if value is None:
            if self.config.required:
                self._fail("Required", path, ErrorKind.REQUIRED)
            return None
        if context is None:
            context = ValidationContext()
        value = self._check(value, path, context)
        return run_transforms(self.config.transforms, value, path, self.config.required)

    def __call__(self, value: Any = None, path: str = "", context: ValidationContext | None = None) -> Any:
        """Alias for ``validate``."""
        return self.validate(value, path, context)

    @abstractmethod
    def _check(self, value: Any, path: str, context: ValidationContext) -> Any:
        """Run the kind-specific checks on a present value."""

    def get_definition(self) -> dict[str, Any]:
        """Return a data-only snapshot of this validator's configuration.

        Custom transforms are not included. The snapshot is a fresh copy on
        every call.

        Returns:
            Dictionary with ``type``, ``required`` and any configured
            ``min``, ``max``, ``whitelist``, ``blacklist``, ``unknown`` and
            ``items`` entries
        """
        config = self.config
        definition: dict[str, Any] = {
            "type": config.kind.value,
            "required": config.required,
        }
        if config.min is not None:
            definition["min"] = config.min
        if config.max is not None:
            definition["max"] = config.max
        if config.allowed is not None:
            definition["whitelist"] = list(config.allowed)
        if config.disallowed is not None:
            definition["blacklist"] = list(config.disallowed)
        return definition

    def _fail(self, reason: str, path: str, kind: ErrorKind) -> NoReturn:
        logger.debug(f"{self.kind.value} validation failed at '{path}' ({kind.value}): {reason}")
        raise ValidationError(reason, path, kind)

    def _expect(self, matches: bool, path: str) -> None:
        if not matches:
            self._fail(f"Invalid type expected: {self.kind.value}", path, ErrorKind.TYPE_MISMATCH)

    def __repr__(self) -> str:
        state = "required" if self.config.required else "optional"
        return f"{type(self).__name__}({state})"


class RangeMixin:
    """``min``/``max`` setters and the inclusive bound check.

    The measured quantity is the value itself for numbers and the length for
    strings and arrays. A bound of ``0`` is treated as unset.
    """

    config: ValidatorConfig
    _bound_unit: ClassVar[str] = ""

    def min(self: V, min: float) -> V:
        """Set the inclusive lower bound (fluent API)."""
        self.config.min = _bound(min, "min")
        _warn_on_inverted_bounds(self.config)
        return self

    def max(self: V, max: float) -> V:
        """Set the inclusive upper bound (fluent API)."""
        self.config.max = _bound(max, "max")
        _warn_on_inverted_bounds(self.config)
        return self

    def _check_bounds(self, measured: float, path: str) -> None:
        config = self.config
        if config.min and measured < config.min:
            self._fail(f"Minimum of {config.min}{self._bound_unit} required", path, ErrorKind.BELOW_MINIMUM)
        if config.max and measured > config.max:
            self._fail(f"Maximum of {config.max}{self._bound_unit} required", path, ErrorKind.ABOVE_MAXIMUM)


class EnumerationMixin:
    """``whitelist``/``blacklist`` setters and the membership check."""

    config: ValidatorConfig

    def whitelist(self: V, values: list[Any]) -> V:
        """Accept only the given values (fluent API)."""
        self.config.allowed = list(values)
        _warn_on_overlap(self.config)
        return self

    def blacklist(self: V, values: list[Any]) -> V:
        """Reject the given values (fluent API)."""
        self.config.disallowed = list(values)
        _warn_on_overlap(self.config)
        return self

    def _check_enumeration(self, value: Any, path: str) -> None:
        config = self.config
        if config.allowed is not None and not _contains(config.allowed, value):
            self._fail(
                f"Invalid value, must be one of: {_join(config.allowed)}",
                path,
                ErrorKind.NOT_WHITELISTED,
            )
        if config.disallowed is not None and _contains(config.disallowed, value):
            self._fail(
                f"Invalid value, must NOT be one of: {_join(config.disallowed)}",
                path,
                ErrorKind.BLACKLISTED,
            )


def _bound(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise SchemaError(
            f"{name} must be a number, got {type(value).__name__}",
            context={name: repr(value)},
        )
    return value


def _warn_on_inverted_bounds(config: ValidatorConfig) -> None:
    if config.min is not None and config.max is not None and config.min > config.max:
        logger.warning(
            f"{config.kind.value} validator has min ({config.min}) greater than max ({config.max}); "
            "no value can pass"
        )


def _warn_on_overlap(config: ValidatorConfig) -> None:
    if config.allowed is None or config.disallowed is None:
        return
    overlap = [value for value in config.allowed if _contains(config.disallowed, value)]
    if overlap:
        logger.warning(f"{config.kind.value} validator both whitelists and blacklists: {_join(overlap)}")


def _contains(values: list[Any], value: Any) -> bool:
    # bool never matches an int or float of equal value
    return any(isinstance(candidate, bool) is isinstance(value, bool) and candidate == value for candidate in values)


def _join(values: list[Any]) -> str:
    return ", ".join(str(value) for value in values)
