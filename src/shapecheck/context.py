"""Per-call validation state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .exceptions import ErrorKind, ValidationError
from .settings import ValidationSettings, get_settings


@dataclass(frozen=True)
class ValidationContext:
    """State threaded through one recursive ``validate`` call.

    A fresh context is created for every top-level call; containers hand a
    deeper copy to their children through ``descend``.
    """

    settings: ValidationSettings = field(default_factory=get_settings)
    depth: int = 0

    def descend(self, path: str) -> ValidationContext:
        """Return the context for a child one nesting level down.

        Args:
            path: Path of the child, reported if the depth limit is hit

        Returns:
            Context with depth increased by one

        Raises:
            ValidationError: If the child would exceed ``settings.max_depth``
        """
        depth = self.depth + 1
        if depth > self.settings.max_depth:
            raise ValidationError(
                f"Maximum nesting depth of {self.settings.max_depth} exceeded",
                path,
                ErrorKind.MAX_DEPTH_EXCEEDED,
            )
        return replace(self, depth=depth)
