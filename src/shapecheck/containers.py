"""Container validators: arrays and objects.

Containers only check structure (type, element count, which keys are present)
and hand every element or member to its child validator, so schemas nest to
any depth without repeating scalar logic.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import RangeMixin, Validator
from .config import Kind, ValidatorConfig
from .context import ValidationContext
from .exceptions import ErrorKind, SchemaError
from .paths import join_index, join_key


def _ensure_validator(candidate: Any, where: str) -> Validator:
    if not isinstance(candidate, Validator):
        raise SchemaError(
            f"{where} must be a validator, got {type(candidate).__name__}",
            context={"where": where},
        )
    return candidate


class ArrayValidator(RangeMixin, Validator):
    """Validates a list (or tuple) whose elements all match one validator.

    Bounds apply to the number of elements. The result is always a new list.

    Example:
        ```python
        scores = ArrayValidator(NumberValidator()).min(1)
        scores.validate([1, "2"])
        # [1, 2]
        ```
    """

    kind = Kind.ARRAY
    _bound_unit = " elements"

    def __init__(self, item: Validator | None = None, config: ValidatorConfig | None = None):
        """Initialize the array validator.

        Args:
            item: Validator applied to every element
            config: Existing configuration to share (``item`` is then optional)
        """
        super().__init__(config)
        if item is not None:
            self.config.item = _ensure_validator(item, "Array item")
        elif self.config.item is None:
            raise SchemaError("Array validator requires an item validator")

    @property
    def item(self) -> Validator:
        return self.config.item

    def _check(self, value: Any, path: str, context: ValidationContext) -> list[Any]:
        self._expect(isinstance(value, (list, tuple)), path)
        self._check_bounds(len(value), path)
        validated = []
        for index, element in enumerate(value):
            element_path = join_index(path, index)
            validated.append(self.item.validate(element, element_path, context.descend(element_path)))
        return validated

    def get_definition(self) -> dict[str, Any]:
        definition = super().get_definition()
        definition["items"] = self.item.get_definition()
        return definition


class ObjectValidator(Validator):
    """Validates a mapping against a declared set of member validators.

    Undeclared keys are rejected unless ``unknown(True)`` was called. The
    input mapping is never modified; a new ``dict`` is returned holding the
    validated members in input order.

    Example:
        ```python
        user = ObjectValidator({
            "name": StringValidator(),
            "age": NumberValidator().optional(),
        })
        user.validate({"name": "Ada", "age": "36"})
        # {'name': 'Ada', 'age': 36}
        ```
    """

    kind = Kind.OBJECT

    def __init__(
        self,
        fields: Mapping[str, Validator] | None = None,
        config: ValidatorConfig | None = None,
    ):
        """Initialize the object validator.

        Args:
            fields: Member name to validator, in declaration order
            config: Existing configuration to share (``fields`` is then optional)
        """
        super().__init__(config)
        if fields is not None:
            if not isinstance(fields, Mapping):
                raise SchemaError(
                    f"Object fields must be a mapping, got {type(fields).__name__}",
                    context={"fields": repr(fields)},
                )
            self.config.fields = {
                name: _ensure_validator(validator, f"Field '{name}'") for name, validator in fields.items()
            }
        elif self.config.fields is None:
            self.config.fields = {}

    @property
    def fields(self) -> dict[str, Validator]:
        return self.config.fields

    def unknown(self, enabled: bool = True) -> ObjectValidator:
        """Allow or forbid keys that are not declared (fluent API)."""
        self.config.allow_unknown_fields = bool(enabled)
        return self

    def _check(self, value: Any, path: str, context: ValidationContext) -> dict[Any, Any]:
        self._expect(isinstance(value, Mapping), path)
        fields = self.fields

        # an optional object does not insist on its required members
        if self.config.required:
            for name, validator in fields.items():
                if validator.is_required and name not in value:
                    self._fail("Missing required keys", join_key(path, name), ErrorKind.MISSING_REQUIRED_KEY)

        validated: dict[Any, Any] = {}
        for key, member in value.items():
            member_path = join_key(path, key)
            if key in fields:
                validated[key] = fields[key].validate(member, member_path, context.descend(member_path))
            elif self.config.allow_unknown_fields:
                validated[key] = member
            else:
                self._fail(f"Unknown key not allowed {key}", member_path, ErrorKind.UNKNOWN_KEY_NOT_ALLOWED)
        return validated

    def get_definition(self) -> dict[str, Any]:
        definition = super().get_definition()
        definition["unknown"] = self.config.allow_unknown_fields
        definition["items"] = {name: validator.get_definition() for name, validator in self.fields.items()}
        return definition
