"""Tests for path composition."""

import pytest

import shapecheck as sc
from shapecheck import ValidationError
from shapecheck.paths import join_index, join_key


class TestJoin:
    """Test the path helpers."""

    @pytest.mark.parametrize(
        "path,key,expected",
        [
            ("", "foo", "foo"),
            ("foo", "bar", "foo.bar"),
            ("[0]", "bar", "[0].bar"),
            ("foo", "a.b", 'foo["a.b"]'),
            ("", "x[1]", '["x[1]"]'),
            ("foo", "", 'foo[""]'),
            ("foo", 3, "foo.3"),
        ],
    )
    def test_join_key(self, path, key, expected):
        """Keys join with dots, ambiguous keys are quoted."""
        assert join_key(path, key) == expected

    def test_join_index(self):
        """Indices join with brackets."""
        assert join_index("", 0) == "[0]"
        assert join_index("items", 2) == "items[2]"
        assert join_index("grid[1]", 4) == "grid[1][4]"


def test_dotted_key_reported_quoted():
    """A member whose name contains a dot is reported unambiguously."""
    schema = sc.object({"content.type": sc.string()})
    with pytest.raises(ValidationError) as exc_info:
        schema.validate({"content.type": 1}, "headers")
    assert exc_info.value.path == 'headers["content.type"]'


def test_nested_arrays():
    """Indices of nested arrays stack."""
    schema = sc.array(sc.array(sc.number()))
    with pytest.raises(ValidationError) as exc_info:
        schema.validate([[1], [2, "x"]])
    assert exc_info.value.path == "[1][1]"
