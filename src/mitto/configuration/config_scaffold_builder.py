"""Configuration scaffold generation helpers."""

from __future__ import annotations

import json
from pathlib import Path

from mitto.schema_management.schema_models import SchemaDocument

DEFAULT_CONFIG_FILENAME = "config.json"


def build_configuration_scaffold(schema: SchemaDocument) -> dict[str, object]:
    """Build a configuration skeleton with placeholders for every declared field.

    Required fields get a `<REQUIRED kind>` placeholder, optional fields their
    declared default or an `<OPTIONAL kind>` placeholder.
    """
    scaffold: dict[str, object] = {
        key: f"<REQUIRED {spec.kind.value}>" for key, spec in schema.required.items()
    }
    for key, spec in schema.optional.items():
        scaffold[key] = spec.default if spec.has_default else f"<OPTIONAL {spec.kind.value}>"
    return scaffold


def write_configuration_scaffold(schema: SchemaDocument, output_path: Path | str) -> Path:
    """Write the configuration scaffold as JSON to the requested output path.

    Args:
      schema: Validated schema describing the fields to scaffold.
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    text = json.dumps(build_configuration_scaffold(schema), indent=2, default=repr)
    destination.write_text(f"{text}\n", encoding="utf-8")
    return destination.resolve()
