"""
Node definitions for a parsed JSON Schema document.

Validation keywords are carried so nothing from the document is lost,
but only `type`, `properties`, `items`, `definitions` and `$ref` drive
code generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StringType:
    """`"type": "<name>"`"""

    name: str


@dataclass(frozen=True)
class TypeList:
    """`"type": ["<name>", ...]`"""

    names: tuple[str, ...] = ()


TypeField = StringType | TypeList


@dataclass(frozen=True)
class Schema:
    """One JSON Schema node."""

    id: str = ""
    schema: str | None = None  # $schema
    title: str = ""
    description: str = ""
    default: Any = None

    # Numeric constraints
    multiple_of: float | None = None
    maximum: float | None = None
    exclusive_maximum: bool = False
    minimum: float | None = None
    exclusive_minimum: bool = False

    # String constraints
    max_length: int | None = None
    min_length: int | None = None
    pattern: str = ""
    format: str = ""

    # Array keywords
    additional_items: bool | Schema | None = None
    items: Schema | None = None
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool = False

    # Object keywords
    max_properties: int | None = None
    min_properties: int | None = None
    required: tuple[str, ...] = ()
    additional_properties: bool | Schema | None = None
    definitions: dict[str, Schema] = field(default_factory=dict)
    properties: dict[str, Schema] = field(default_factory=dict)
    pattern_properties: dict[str, Schema] = field(default_factory=dict)
    dependencies: dict[str, Any] = field(default_factory=dict)

    enum: tuple[Any, ...] = ()

    # Composition keywords, stored but never mapped
    all_of: tuple[Schema, ...] = ()
    any_of: tuple[Schema, ...] = ()
    one_of: tuple[Schema, ...] = ()
    not_: Schema | None = None

    type: TypeField | None = None
    ref: str | None = None  # $ref

    # Location in the source document, for error messages
    source_path: str = field(default="#", compare=False)

    @property
    def type_name(self) -> str | None:
        """The single type name, or None when absent or a list."""
        if isinstance(self.type, StringType):
            return self.type.name
        return None
