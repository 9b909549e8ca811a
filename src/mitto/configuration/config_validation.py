"""Configuration-against-schema validation and default merging."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from mitto.errors import FormatError, MissingConfigError, MissingFieldError, TypeMismatchError
from mitto.schema_management.schema_models import FieldKind, SchemaDocument

from .package_metadata import UNNAMED_PACKAGE

_LOGGER = logging.getLogger(__name__)

ConsumerNameResolver = Callable[[], str]


def validate_config(
    config: Any,
    schema: SchemaDocument | None,
    *,
    consumer_name: ConsumerNameResolver | None = None,
) -> Any:
    """Check a configuration against a validated schema and merge declared defaults.

    Args:
      config: Parsed configuration mapping, or None when no file was found.
      schema: Validated schema, or None when the package declares no constraints.
      consumer_name: Called only when building a missing-configuration message to
        name the consuming package.

    Returns:
      `config` itself when no schema applies, otherwise the (possibly defaulted)
      configuration or None.

    Raises:
      MissingConfigError: If required fields are declared and `config` is None.
      MissingFieldError: If a required field is absent.
      TypeMismatchError: If a present field has a different kind than declared.
      FormatError: If `config` is not a mapping.
    """
    if schema is None:
        return config

    if config is None:
        if schema.required:
            package_name = consumer_name() if consumer_name else UNNAMED_PACKAGE
            raise MissingConfigError(
                f"{schema.name} configuration file not found, and is required by {package_name}"
            )
        if schema.has_default:
            return apply_defaults({}, schema)
        return None

    if not isinstance(config, Mapping):
        raise FormatError(
            f"{schema.name} configuration must be an object, got {type(config).__name__}"
        )

    for key, spec in schema.required.items():
        if key not in config:
            raise MissingFieldError(f"Required property {key} not found in {schema.name}")
        if not spec.accepts(config[key]):
            raise TypeMismatchError(
                f"Required property {key} is type {FieldKind.of(config[key]).value} "
                f"and expected to be of type {spec.kind.value}"
            )

    for key, spec in schema.optional.items():
        if key not in config:
            continue
        if not spec.accepts(config[key]):
            raise TypeMismatchError(
                f"Optional property {key} is type {FieldKind.of(config[key]).value} "
                f"and expected to be of type {spec.kind.value}"
            )

    if schema.has_default:
        return apply_defaults(config, schema)
    return config


def apply_defaults(
    config: Mapping[str, Any], schema: SchemaDocument
) -> MutableMapping[str, Any]:
    """Write every declared optional default into `config`.

    Defaults overwrite values already present for the same field. The mapping is
    mutated in place and returned; read-only mappings are copied into a dict first.
    """
    target = config if isinstance(config, MutableMapping) else dict(config)
    for key, default in schema.defaults().items():
        if key in target and target[key] is not default and target[key] != default:
            _LOGGER.warning(
                "Optional property %s of %s overwritten by its declared default (%r -> %r)",
                key,
                schema.name,
                target[key],
                default,
            )
        target[key] = default
    return target
