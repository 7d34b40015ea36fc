"""Path composition for error locations.

Paths address a sub-value relative to the validated root: object members are
joined with dots (``user.address.city``), array elements with brackets
(``users[2].email``). Keys that would make a dotted path ambiguous are
bracket-quoted (``headers["content.type"]``).
"""

from __future__ import annotations

import json

_RESERVED = (".", "[", "]")

ROOT = ""


def join_key(path: str, key: str) -> str:
    """Append an object member to a path.

    Args:
        path: Parent path (empty for the root)
        key: Member name

    Returns:
        The composed path
    """
    key = str(key)
    if not key or any(char in key for char in _RESERVED):
        return f"{path}[{json.dumps(key)}]"
    if not path:
        return key
    return f"{path}.{key}"


def join_index(path: str, index: int) -> str:
    """Append an array index to a path."""
    return f"{path}[{index}]"
