"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_configuration_scaffold,
    write_configuration_scaffold,
)
from .config_validation import apply_defaults, validate_config
from .package_metadata import UNNAMED_PACKAGE, resolve_package_name

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "UNNAMED_PACKAGE",
    "apply_defaults",
    "build_configuration_scaffold",
    "resolve_package_name",
    "validate_config",
    "write_configuration_scaffold",
]
