"""Validator kinds and the configuration shared by a required/optional pair.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import SchemaError

if TYPE_CHECKING:
    from .base import Validator
    from .pipeline import Transform


class Kind(Enum):
    """The closed set of data kinds a validator can describe."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (Kind.ARRAY, Kind.OBJECT)


@dataclass(eq=False)
class ValidatorConfig:
    """Mutable configuration behind one or more validator handles.

    Calling ``optional()`` or ``required()`` on a validator produces a new
    handle over the *same* ``ValidatorConfig``; toggling ``required`` through
    either handle is visible through both. Every other setting is shared the
    same way. ``kind`` is fixed at construction.

    Attributes:
        kind: Data kind being validated
        required: Whether an absent (``None``) value is rejected
        min: Lower bound (length for strings/arrays, value for numbers)
        max: Upper bound (length for strings/arrays, value for numbers)
        allowed: Whitelist of accepted values
        disallowed: Blacklist of rejected values
        allow_unknown_fields: Whether objects accept undeclared keys
        transforms: Custom transforms in registration order
        item: Element validator (arrays)
        fields: Member validators in declaration order (objects)
    """

    kind: Kind
    required: bool = True
    min: float | None = None
    max: float | None = None
    allowed: list[Any] | None = None
    disallowed: list[Any] | None = None
    allow_unknown_fields: bool = False
    transforms: list[Transform] = field(default_factory=list)
    item: Validator | None = None
    fields: dict[str, Validator] | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "kind" and "kind" in self.__dict__ and self.__dict__["kind"] is not value:
            raise SchemaError(
                f"Validator kind is fixed at '{self.kind.value}' and cannot become '{getattr(value, 'value', value)}'",
                context={"kind": self.kind.value},
            )
        super().__setattr__(name, value)
