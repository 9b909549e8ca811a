"""Configuration loading entry point."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Any

from mitto.configuration import resolve_package_name, validate_config
from mitto.file_resolution import load_document
from mitto.schema_management import SCHEMA_FILENAME, resolve_schema, validate_schema

_LOGGER = logging.getLogger(__name__)


def load_config(filename: str, *, start_dir: Path | str | None = None) -> Any:
    """Find the configuration called `filename` and enforce the package's `.mitto` schema.

    Both files are located by searching `start_dir` (the current working directory
    by default) and then each parent directory. Without a schema the located
    configuration is returned as-is.

    Args:
      filename: Configuration file name supplied by the consuming package.
      start_dir: Directory the upward searches start from.

    Returns:
      The configuration with declared defaults merged in, or None when no
      configuration exists and none is required.

    Raises:
      MittoError: If the schema or the configuration is invalid.
    """
    origin = Path.cwd() if start_dir is None else Path(start_dir)
    schema = validate_schema(resolve_schema(origin))
    config = load_document(filename, origin)
    if schema is None:
        _LOGGER.debug("Returning %s without validation", filename)
        return config

    _LOGGER.debug("Validating %s against %s schema %r", filename, SCHEMA_FILENAME, schema.name)
    return validate_config(
        config,
        schema,
        consumer_name=partial(resolve_package_name, origin),
    )
