"""Tests for the shared configuration behind required/optional handles."""

import pytest

import shapecheck as sc
from shapecheck import ErrorKind, Kind, SchemaError, ValidationError, ValidatorConfig


class TestHandleAliasing:
    """optional() and required() return handles over one configuration."""

    def test_new_handle_same_config(self):
        """The optional handle is a new object sharing the config."""
        required = sc.number()
        optional = required.optional()
        assert optional is not required
        assert optional.config is required.config
        assert type(optional) is type(required)

    def test_required_flag_is_shared(self):
        """Both handles observe the latest toggle."""
        first = sc.string()
        second = first.optional()
        assert first.is_required is False
        assert second.is_required is False
        third = second.required()
        assert first.is_required is True
        assert second.is_required is True
        assert third.is_required is True

    def test_bounds_apply_through_either_handle(self):
        """Configuration made before or after toggling is shared."""
        optional = sc.number().min(1).optional()
        optional.max(10)
        assert optional.validate(None) is None
        with pytest.raises(ValidationError) as exc_info:
            optional.validate(0.5)
        assert exc_info.value.kind is ErrorKind.BELOW_MINIMUM
        with pytest.raises(ValidationError):
            optional.required().validate(11)

    def test_transforms_shared(self):
        """A transform added via one handle runs through the other."""
        base = sc.string()
        optional = base.optional()
        base.custom(str.upper)
        assert optional.validate("abc") == "ABC"

    def test_container_children_shared(self):
        """Arrays and objects keep their children across toggles."""
        array = sc.array(sc.number()).optional().required()
        assert array.validate(["1"]) == [1]
        obj = sc.object({"a": sc.number()}).optional()
        assert obj.fields["a"].kind is Kind.NUMBER
        assert obj.required().validate({"a": "2"}) == {"a": 2}

    def test_required_object_member_toggle(self):
        """Toggling a member after building the object changes the object."""
        member = sc.string()
        schema = sc.object({"name": member})
        with pytest.raises(ValidationError):
            schema.validate({})
        member.optional()
        assert schema.validate({}) == {}


class TestKind:
    """The kind of a configuration never changes."""

    def test_kind_reassignment_rejected(self):
        """Assigning a different kind raises."""
        config = sc.string().config
        with pytest.raises(SchemaError):
            config.kind = Kind.NUMBER
        assert config.kind is Kind.STRING

    def test_same_kind_assignment_allowed(self):
        """Re-assigning the same kind is a no-op."""
        config = ValidatorConfig(kind=Kind.BOOLEAN)
        config.kind = Kind.BOOLEAN
        assert config.kind is Kind.BOOLEAN

    def test_handle_rejects_foreign_config(self):
        """A validator cannot wrap another kind's configuration."""
        with pytest.raises(SchemaError):
            sc.NumberValidator(config=sc.string().config)

    def test_container_kinds(self):
        """Arrays and objects are containers."""
        assert Kind.ARRAY.is_container
        assert Kind.OBJECT.is_container
        assert not Kind.STRING.is_container
