"""Schema structure validation service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mitto.errors import StructureError

from .schema_models import FieldKind, FieldSpec, SchemaDocument

_REQUIRED_SECTION = "required"
_OPTIONAL_SECTION = "optional"


def validate_schema(document: Mapping[str, Any] | None) -> SchemaDocument | None:
    """Validate a raw `.mitto` document and return its typed form.

    Fields are checked in document order, `required` before `optional`, and the
    first violation aborts validation.

    Args:
      document: Parsed schema mapping, or None when no schema file was found.

    Returns:
      The typed schema, or None when `document` is None.

    Raises:
      StructureError: If the document does not describe a valid schema.
    """
    if document is None:
        return None
    if not isinstance(document, Mapping):
        raise StructureError("Your .mitto must contain an object at its top level.")
    if "name" not in document:
        raise StructureError('"name" property is missing from your .mitto and is required.')
    name = document["name"]
    if not isinstance(name, str):
        raise StructureError('"name" property of your .mitto must be of type "string".')

    required = {
        key: _parse_field_spec(key, spec, _REQUIRED_SECTION)
        for key, spec in _section_items(document, _REQUIRED_SECTION)
    }
    optional = {
        key: _parse_field_spec(key, spec, _OPTIONAL_SECTION)
        for key, spec in _section_items(document, _OPTIONAL_SECTION)
    }
    return SchemaDocument(name=name, required=required, optional=optional)


def _section_items(document: Mapping[str, Any], section: str) -> list[tuple[str, Any]]:
    value = document.get(section)
    if value is None:
        return []
    if not isinstance(value, Mapping):
        raise StructureError(f'"{section}" property of your .mitto must be an object.')
    return list(value.items())


def _parse_field_spec(key: str, raw: Any, section: str) -> FieldSpec:
    label = f'{section} parameter "{key}"'
    if not isinstance(raw, Mapping):
        raise StructureError(f"Your .mitto's {label} must be an object.")
    if "type" not in raw:
        raise StructureError(f"\"type\" property is missing from your .mitto's {label}")

    kind = FieldKind.parse(raw["type"])
    if kind is None:
        raise StructureError(
            f"{raw['type']} is not a valid data type for your .mitto's {label}. "
            f"Expected one of: {FieldKind.describe_all()}"
        )

    description = raw.get("description")
    if "description" in raw and not isinstance(description, str):
        raise StructureError(
            f"\"description\" property of your .mitto's {label} must be of type \"string\""
        )

    if section != _OPTIONAL_SECTION or "default" not in raw:
        return FieldSpec(kind=kind, description=description)

    default = raw["default"]
    if FieldKind.of(default) is not kind:
        raise StructureError(
            f"\"default\" property of your .mitto's {label} must be a {kind.value}, "
            'as specified by "type"'
        )
    return FieldSpec(kind=kind, description=description, default=default)
