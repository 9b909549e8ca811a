"""Error taxonomy shared by schema and configuration validation."""

from __future__ import annotations


class MittoError(Exception):
    """Base class for every fatal schema or configuration failure."""


class StructureError(MittoError):
    """Raised when the schema document itself is malformed."""


class MissingConfigError(MittoError):
    """Raised when required fields are declared but no configuration file exists."""


class MissingFieldError(MittoError):
    """Raised when the configuration omits a required field."""


class TypeMismatchError(MittoError):
    """Raised when a configured value has a different kind than declared."""


class FormatError(MittoError):
    """Raised when a located file cannot be parsed into a mapping."""
