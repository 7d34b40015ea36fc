"""Process-wide validation settings.

Settings are read lazily from the environment the first time they are needed:

- ``SHAPECHECK_MAX_DEPTH``: maximum container nesting depth ``validate`` will
  descend into before failing (default: 64)

Example:
    ```python
    from shapecheck.settings import configure, get_settings

    configure(max_depth=16)
    get_settings().max_depth
    # 16
    ```
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any

from .exceptions import SchemaError

logger = logging.getLogger(__name__)

ENV_PREFIX = "SHAPECHECK_"
DEFAULT_MAX_DEPTH = 64


@dataclass(frozen=True)
class ValidationSettings:
    """Settings that influence how ``validate`` walks a value.

    Attributes:
        max_depth: Deepest container nesting accepted (the root is depth 0)
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool) or self.max_depth < 1:
            raise SchemaError(
                f"max_depth must be a positive integer, got {self.max_depth!r}",
                context={"max_depth": self.max_depth},
            )

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> ValidationSettings:
        """Build settings from environment variables.

        Args:
            prefix: Environment variable prefix

        Returns:
            Settings with environment overrides applied

        Raises:
            SchemaError: If a variable holds an unusable value
        """
        overrides: dict[str, Any] = {}
        if raw := os.environ.get(f"{prefix}MAX_DEPTH"):
            try:
                overrides["max_depth"] = int(raw.strip())
            except ValueError as e:
                raise SchemaError(
                    f"{prefix}MAX_DEPTH must be an integer, got {raw!r}",
                    context={"variable": f"{prefix}MAX_DEPTH", "value": raw},
                ) from e
            logger.debug(f"max_depth overridden from environment: {overrides['max_depth']}")
        return cls(**overrides)


_settings: ValidationSettings | None = None


def get_settings() -> ValidationSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ValidationSettings.from_env()
    return _settings


def configure(**overrides: Any) -> ValidationSettings:
    """Replace the process-wide settings.

    Args:
        **overrides: Fields of ``ValidationSettings`` to change

    Returns:
        The new settings
    """
    global _settings
    _settings = replace(get_settings(), **overrides)
    logger.info(f"Validation settings updated: {_settings}")
    return _settings


def reset_settings() -> None:
    """Forget configured settings so the next access re-reads the environment."""
    global _settings
    _settings = None
