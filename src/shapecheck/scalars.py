"""Scalar validators: strings, numbers and booleans.
"""

from __future__ import annotations

import re
from numbers import Real
from typing import Any

from .base import EnumerationMixin, RangeMixin, Validator
from .config import Kind
from .context import ValidationContext
from .exceptions import ErrorKind
from .pipeline import email_transform

_BOOLEAN_STRINGS = {"true": True, "false": False}

# ASCII numerals only
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)
_PREFIX_BASES = {"0x": 16, "0X": 16, "0o": 8, "0O": 8, "0b": 2, "0B": 2}
_PREFIXED_DIGITS = {
    16: re.compile(r"[0-9a-fA-F]+"),
    8: re.compile(r"[0-7]+"),
    2: re.compile(r"[01]+"),
}


class StringValidator(RangeMixin, EnumerationMixin, Validator):
    """Validates ``str`` values; bounds apply to the character count.

    Example:
        ```python
        username = StringValidator().min(3).max(20).blacklist(["admin", "root"])
        username.validate("alice")
        # 'alice'
        ```
    """

    kind = Kind.STRING
    _bound_unit = " characters"

    def email(self) -> StringValidator:
        """Require an email-shaped value and lower-case it (fluent API).

        Registered as a custom transform, so it runs in order with any other
        transforms added through ``custom``.
        """
        return self.custom(email_transform)

    def _check(self, value: Any, path: str, context: ValidationContext) -> str:
        self._expect(isinstance(value, str), path)
        self._check_bounds(len(value), path)
        self._check_enumeration(value, path)
        return value


class NumberValidator(RangeMixin, EnumerationMixin, Validator):
    """Validates real numbers, parsing numeric strings first.

    ``"2"`` becomes ``2``, ``" 2.5 "`` becomes ``2.5`` and ``"0x10"`` becomes
    ``16``. Digit separators and non-ASCII digits are rejected. Booleans are not
    numbers here even though ``bool`` subclasses ``int``.
    """

    kind = Kind.NUMBER

    def _check(self, value: Any, path: str, context: ValidationContext) -> Real:
        if isinstance(value, str):
            value = self._parse(value, path)
        self._expect(isinstance(value, Real) and not isinstance(value, bool), path)
        self._check_bounds(value, path)
        self._check_enumeration(value, path)
        return value

    def _parse(self, text: str, path: str) -> int | float:
        text = text.strip()
        # Handle hex, octal, binary
        if base := _PREFIX_BASES.get(text[:2]):
            if _PREFIXED_DIGITS[base].fullmatch(text[2:]):
                return int(text[2:], base)
        elif _INTEGER.fullmatch(text):
            return int(text)
        elif _DECIMAL.fullmatch(text) or _INFINITY.fullmatch(text):
            return float(text)
        self._fail("Invalid number", path, ErrorKind.INVALID_NUMBER)


class BooleanValidator(EnumerationMixin, Validator):
    """Validates ``bool`` values; the strings ``"true"``/``"false"`` are converted."""

    kind = Kind.BOOLEAN

    def _check(self, value: Any, path: str, context: ValidationContext) -> bool:
        if isinstance(value, str):
            if value not in _BOOLEAN_STRINGS:
                self._fail("String cannot be converted to true/false", path, ErrorKind.INVALID_BOOLEAN)
            value = _BOOLEAN_STRINGS[value]
        self._expect(isinstance(value, bool), path)
        self._check_enumeration(value, path)
        return value
