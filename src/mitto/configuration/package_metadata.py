"""Consuming package name lookup used to enrich error messages."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from mitto.file_resolution import ResolutionStatus, ResolvedFile, resolve_file

PACKAGE_JSON_FILENAME = "package.json"
PYPROJECT_FILENAME = "pyproject.toml"
UNNAMED_PACKAGE = "an unnamed package"

_LOGGER = logging.getLogger(__name__)


def resolve_package_name(start_dir: Path | str | None = None) -> str:
    """Return the nearest declared package name, falling back to a placeholder.

    `package.json` is consulted first, then the `[project]` table of
    `pyproject.toml`. Missing or unreadable metadata never raises.
    """
    name = _declared_name(resolve_file(PACKAGE_JSON_FILENAME, start_dir), table=None)
    if name is None:
        name = _declared_name(resolve_file(PYPROJECT_FILENAME, start_dir), table="project")
    if name is None:
        _LOGGER.warning(
            "No package name found in %s or %s; using %r",
            PACKAGE_JSON_FILENAME,
            PYPROJECT_FILENAME,
            UNNAMED_PACKAGE,
        )
        return UNNAMED_PACKAGE
    return name


def _declared_name(resolved: ResolvedFile, *, table: str | None) -> str | None:
    if resolved.status is ResolutionStatus.PARSE_ERROR:
        _LOGGER.warning(
            "Ignoring unparseable package metadata %s: %s", resolved.path, resolved.reason
        )
        return None
    metadata: object = resolved.value
    if table is not None and isinstance(metadata, Mapping):
        metadata = metadata.get(table)
    if not isinstance(metadata, Mapping):
        return None
    name = metadata.get("name")
    if isinstance(name, str) and name:
        return name
    return None
