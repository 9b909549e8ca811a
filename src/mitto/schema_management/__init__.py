"""Schema management exports."""

from .schema_models import FieldKind, FieldSpec, SchemaDocument
from .schema_resolution import SCHEMA_FILENAME, resolve_schema
from .schema_validation import validate_schema

__all__ = [
    "SCHEMA_FILENAME",
    "FieldKind",
    "FieldSpec",
    "SchemaDocument",
    "resolve_schema",
    "validate_schema",
]
