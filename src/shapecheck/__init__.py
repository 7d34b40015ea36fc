"""Runtime data-shape validation.

Build a schema from composable validators, then validate untrusted input
against it. Validation coerces numeric and boolean strings, enforces bounds,
enumerations and custom transforms, and stops at the first violation with a
``ValidationError`` naming the offending path.

Example:
    ```python
    import shapecheck as sc

    schema = sc.object({
        "name": sc.string().min(1),
        "scores": sc.array(sc.number().min(1).max(10)),
    })
    schema.validate({"name": "Ada", "scores": [1, "7"]})
    # {'name': 'Ada', 'scores': [1, 7]}

    try:
        schema.validate({"name": "Ada", "scores": [1, 70]})
    except sc.ValidationError as e:
        e.details
        # {'path': 'scores[1]', 'message': 'Maximum of 10 required'}
    ```
"""

from shapecheck.base import Validator
from shapecheck.config import Kind, ValidatorConfig
from shapecheck.containers import ArrayValidator, ObjectValidator
from shapecheck.context import ValidationContext
from shapecheck.exceptions import ErrorKind, SchemaError, ShapecheckError, ValidationError
from shapecheck.factories import array, boolean, number, object, string  # noqa: A004
from shapecheck.pipeline import Failure
from shapecheck.scalars import BooleanValidator, NumberValidator, StringValidator
from shapecheck.settings import ValidationSettings, configure, get_settings, reset_settings

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Factories
    "string",
    "number",
    "boolean",
    "array",
    "object",
    # Validators
    "Validator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "ArrayValidator",
    "ObjectValidator",
    "Kind",
    "ValidatorConfig",
    # Pipeline
    "Failure",
    # Errors
    "ShapecheckError",
    "ValidationError",
    "SchemaError",
    "ErrorKind",
    # Settings
    "ValidationSettings",
    "ValidationContext",
    "configure",
    "get_settings",
    "reset_settings",
]
