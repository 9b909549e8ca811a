"""Schema file resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mitto.file_resolution import load_document

SCHEMA_FILENAME = ".mitto"

_LOGGER = logging.getLogger(__name__)


def resolve_schema(start_dir: Path | str | None = None) -> Mapping[str, Any] | None:
    """Return the nearest raw `.mitto` document, or None when the package declares none.

    Raises:
      FormatError: If the located schema file cannot be parsed.
    """
    document = load_document(SCHEMA_FILENAME, start_dir)
    if document is None:
        _LOGGER.debug("No %s schema found; configuration is unconstrained", SCHEMA_FILENAME)
    return document
