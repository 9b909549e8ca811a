"""Package-local configuration loading constrained by a `.mitto` schema."""

from __future__ import annotations

import logging

from .config_loading import load_config
from .configuration import apply_defaults, validate_config
from .errors import (
    FormatError,
    MissingConfigError,
    MissingFieldError,
    MittoError,
    StructureError,
    TypeMismatchError,
)
from .schema_management import (
    SCHEMA_FILENAME,
    FieldKind,
    FieldSpec,
    SchemaDocument,
    resolve_schema,
    validate_schema,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SCHEMA_FILENAME",
    "FieldKind",
    "FieldSpec",
    "SchemaDocument",
    "MittoError",
    "StructureError",
    "MissingConfigError",
    "MissingFieldError",
    "TypeMismatchError",
    "FormatError",
    "load_config",
    "resolve_schema",
    "validate_schema",
    "validate_config",
    "apply_defaults",
]
