"""Structured-module-or-JSON document loading service."""

from __future__ import annotations

import importlib.util
import json
import logging
import sys
import tomllib
import types
from collections.abc import Callable, Mapping
from pathlib import Path

import yaml

from mitto.errors import FormatError

from .resolution_outcomes import ResolutionStatus, ResolvedFile
from .upward_search import find_upward

_LOGGER = logging.getLogger(__name__)


class _UnreadableDocument(Exception):
    """Raised by suffix loaders when a file cannot be turned into a document."""


def resolve_file(filename: str, start_dir: Path | str | None = None) -> ResolvedFile:
    """Locate `filename` by upward search and load it into a tagged outcome."""
    origin = Path.cwd() if start_dir is None else Path(start_dir)
    directory = find_upward(origin, filename)
    if directory is None:
        _LOGGER.debug("No %s found at or above %s", filename, origin)
        return ResolvedFile.not_found()
    return load_file(directory / filename)


def load_file(path: Path) -> ResolvedFile:
    """Load one file as a structured module when its suffix allows, otherwise as JSON text."""
    loader = _STRUCTURED_LOADERS.get(path.suffix.lower(), _load_json_text)
    _LOGGER.debug("Loading %s with %s", path, loader.__name__)
    try:
        value = loader(path)
    except _UnreadableDocument as exc:
        return ResolvedFile.parse_error(path, str(exc))

    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        return ResolvedFile.parse_error(
            path, f"top-level value must be an object, got {type(value).__name__}"
        )
    return ResolvedFile.loaded(path, dict(value))


def load_document(
    filename: str, start_dir: Path | str | None = None
) -> Mapping[str, object] | None:
    """Return the nearest document called `filename`, or None when none exists.

    Raises:
      FormatError: If the located file cannot be parsed.
    """
    resolved = resolve_file(filename, start_dir)
    if resolved.status is ResolutionStatus.PARSE_ERROR:
        raise FormatError(f"{resolved.path} could not be parsed: {resolved.reason}")
    return resolved.value


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _UnreadableDocument(f"cannot read file: {exc}") from exc


def _load_json_text(path: Path) -> object:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise _UnreadableDocument(str(exc)) from exc


def _load_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(_read_text(path))
    except yaml.YAMLError as exc:
        raise _UnreadableDocument(str(exc)) from exc


def _load_toml(path: Path) -> object:
    try:
        return tomllib.loads(_read_text(path))
    except tomllib.TOMLDecodeError as exc:
        raise _UnreadableDocument(str(exc)) from exc


def _load_python_module(path: Path) -> object:
    module_name = f"_mitto_document_{abs(hash(path.resolve()))}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise _UnreadableDocument("not an importable Python module")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise _UnreadableDocument(f"import failed: {exc!r}") from exc
    finally:
        sys.modules.pop(module_name, None)
    return _module_namespace(module)


def _module_namespace(module: types.ModuleType) -> dict[str, object]:
    exported = getattr(module, "__all__", None)
    if exported is not None:
        if not isinstance(exported, list | tuple):
            raise _UnreadableDocument("__all__ must be a list or tuple of names")
        for name in exported:
            if not isinstance(name, str):
                raise _UnreadableDocument(f"__all__ entry {name!r} is not a string")
            if not hasattr(module, name):
                raise _UnreadableDocument(f"__all__ names undefined attribute {name!r}")
        return {name: getattr(module, name) for name in exported}
    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith("_") and _is_defined_in(value, module)
    }


def _is_defined_in(value: object, module: types.ModuleType) -> bool:
    if isinstance(value, types.ModuleType):
        return False
    if type(value).__module__ == "__future__":
        return False
    owner = getattr(value, "__module__", None)
    if owner is None or not callable(value):
        return True
    return owner == module.__name__


_STRUCTURED_LOADERS: dict[str, Callable[[Path], object]] = {
    ".py": _load_python_module,
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".toml": _load_toml,
}
