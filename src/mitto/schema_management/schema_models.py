"""Schema management entities."""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final

_NO_DEFAULT: Final = object()


class FieldKind(str, Enum):
    """Primitive value kinds a schema field can declare."""

    UNDEFINED = "undefined"
    OBJECT = "object"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    FUNCTION = "function"

    @classmethod
    def of(cls, value: object) -> FieldKind:
        """Return the runtime kind of a configured value."""
        if value is None:
            return cls.UNDEFINED
        if isinstance(value, Enum):
            return cls.SYMBOL
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, numbers.Number):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if callable(value):
            return cls.FUNCTION
        return cls.OBJECT

    @classmethod
    def parse(cls, raw: object) -> FieldKind | None:
        """Return the kind named by `raw`, or None when it names no known kind."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def describe_all(cls) -> str:
        """Render every valid kind as a quoted, comma separated list."""
        return ", ".join(f'"{kind.value}"' for kind in cls)


@dataclass(frozen=True)
class FieldSpec:
    """Contract for one declared configuration field."""

    kind: FieldKind
    description: str | None = None
    default: object = _NO_DEFAULT

    @property
    def has_default(self) -> bool:
        return self.default is not _NO_DEFAULT

    def accepts(self, value: object) -> bool:
        """Return True when `value` has the declared kind."""
        return FieldKind.of(value) is self.kind


@dataclass(frozen=True)
class SchemaDocument:
    """Validated `.mitto` schema with required and optional field contracts."""

    name: str
    required: Mapping[str, FieldSpec] = field(default_factory=dict)
    optional: Mapping[str, FieldSpec] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", MappingProxyType(dict(self.required)))
        object.__setattr__(self, "optional", MappingProxyType(dict(self.optional)))

    @property
    def has_default(self) -> bool:
        """Return True when any optional field declares a default value."""
        return any(spec.has_default for spec in self.optional.values())

    def defaults(self) -> dict[str, object]:
        """Return declared optional defaults in schema order."""
        return {
            field_name: spec.default
            for field_name, spec in self.optional.items()
            if spec.has_default
        }
