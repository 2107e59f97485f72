"""
JSON Schema parser.

Phase 1 of the pipeline: turn decoded JSON into immutable `Schema` nodes
without resolving references.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import SchemaParseError
from .nodes import Schema, StringType, TypeList

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses decoded JSON into a `Schema` tree."""

    # Deepest schema nesting accepted
    MAX_DEPTH = 100

    # JSON keyword -> (Schema attribute, accepted Python types)
    SCALAR_KEYWORDS: dict[str, tuple[str, tuple[type, ...]]] = {
        "id": ("id", (str,)),
        "$schema": ("schema", (str,)),
        "title": ("title", (str,)),
        "description": ("description", (str,)),
        "multipleOf": ("multiple_of", (int, float)),
        "maximum": ("maximum", (int, float)),
        "exclusiveMaximum": ("exclusive_maximum", (bool,)),
        "minimum": ("minimum", (int, float)),
        "exclusiveMinimum": ("exclusive_minimum", (bool,)),
        "maxLength": ("max_length", (int,)),
        "minLength": ("min_length", (int,)),
        "pattern": ("pattern", (str,)),
        "format": ("format", (str,)),
        "maxItems": ("max_items", (int,)),
        "minItems": ("min_items", (int,)),
        "uniqueItems": ("unique_items", (bool,)),
        "maxProperties": ("max_properties", (int,)),
        "minProperties": ("min_properties", (int,)),
        "$ref": ("ref", (str,)),
    }

    SCHEMA_MAP_KEYWORDS = {
        "definitions": "definitions",
        "properties": "properties",
        "patternProperties": "pattern_properties",
    }

    SCHEMA_LIST_KEYWORDS = {
        "allOf": "all_of",
        "anyOf": "any_of",
        "oneOf": "one_of",
    }

    def __init__(self):
        self._depth = 0

    def parse(self, schema: Any, path: str = "#") -> Schema:
        """
        Parse a decoded JSON Schema document.

        Args:
            schema: The decoded JSON value
            path: Location of the node in the document (for error messages)

        Returns:
            The root `Schema` node

        Raises:
            SchemaParseError: If a keyword has the wrong JSON type or nesting is too deep
        """
        if self._depth >= self.MAX_DEPTH:
            raise SchemaParseError(f"{path}: schema nested deeper than {self.MAX_DEPTH} levels")

        self._depth += 1
        try:
            return self._parse_node(schema, path)
        finally:
            self._depth -= 1

    def _parse_node(self, schema: Any, path: str) -> Schema:
        if not isinstance(schema, dict):
            raise SchemaParseError(f"{path}: expected an object, got {_json_type(schema)}")

        kwargs: dict[str, Any] = {"source_path": path}

        for keyword, (attr, types) in self.SCALAR_KEYWORDS.items():
            if keyword in schema:
                kwargs[attr] = self._scalar(schema[keyword], types, f"{path}/{keyword}")

        if "default" in schema:
            kwargs["default"] = schema["default"]

        for keyword, attr in self.SCHEMA_MAP_KEYWORDS.items():
            if keyword in schema:
                kwargs[attr] = self._schema_map(schema[keyword], f"{path}/{keyword}")

        for keyword, attr in self.SCHEMA_LIST_KEYWORDS.items():
            if keyword in schema:
                kwargs[attr] = self._schema_list(schema[keyword], f"{path}/{keyword}")

        if "items" in schema:
            kwargs["items"] = self.parse(schema["items"], f"{path}/items")
        if "not" in schema:
            kwargs["not_"] = self.parse(schema["not"], f"{path}/not")
        if "additionalItems" in schema:
            kwargs["additional_items"] = self._bool_or_schema(schema["additionalItems"], f"{path}/additionalItems")
        if "additionalProperties" in schema:
            kwargs["additional_properties"] = self._bool_or_schema(schema["additionalProperties"], f"{path}/additionalProperties")

        if "required" in schema:
            kwargs["required"] = tuple(self._string_list(schema["required"], f"{path}/required"))
        if "enum" in schema:
            enum = schema["enum"]
            if not isinstance(enum, list):
                raise SchemaParseError(f"{path}/enum: expected an array, got {_json_type(enum)}")
            kwargs["enum"] = tuple(enum)
        if "dependencies" in schema:
            dependencies = schema["dependencies"]
            if not isinstance(dependencies, dict):
                raise SchemaParseError(f"{path}/dependencies: expected an object, got {_json_type(dependencies)}")
            kwargs["dependencies"] = dict(dependencies)

        if "type" in schema:
            kwargs["type"] = self._type_field(schema["type"], f"{path}/type")

        return Schema(**kwargs)

    def _scalar(self, value: Any, types: tuple[type, ...], path: str) -> Any:
        # bool is an int subclass; only accept it where booleans are expected
        if isinstance(value, bool) and bool not in types:
            raise SchemaParseError(f"{path}: expected {_type_names(types)}, got boolean")
        if not isinstance(value, types):
            raise SchemaParseError(f"{path}: expected {_type_names(types)}, got {_json_type(value)}")
        return value

    def _schema_map(self, value: Any, path: str) -> dict[str, Schema]:
        if not isinstance(value, dict):
            raise SchemaParseError(f"{path}: expected an object, got {_json_type(value)}")
        return {name: self.parse(sub, f"{path}/{name}") for name, sub in value.items()}

    def _schema_list(self, value: Any, path: str) -> tuple[Schema, ...]:
        if not isinstance(value, list):
            raise SchemaParseError(f"{path}: expected an array, got {_json_type(value)}")
        return tuple(self.parse(sub, f"{path}/{i}") for i, sub in enumerate(value))

    def _bool_or_schema(self, value: Any, path: str) -> bool | Schema:
        if isinstance(value, bool):
            return value
        return self.parse(value, path)

    def _string_list(self, value: Any, path: str) -> list[str]:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise SchemaParseError(f"{path}: expected an array of strings")
        return value

    def _type_field(self, value: Any, path: str) -> StringType | TypeList:
        if isinstance(value, str):
            return StringType(value)
        return TypeList(tuple(self._string_list(value, path)))


def load_schema(path: str | Path) -> Schema:
    """
    Read and parse a schema file.

    Args:
        path: Path to a UTF-8 JSON file holding one schema document

    Returns:
        The root `Schema` node

    Raises:
        SchemaParseError: If the file cannot be read, is not JSON, or has the wrong shape
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise SchemaParseError(f"Cannot read schema file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SchemaParseError(f"Schema file {path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Invalid JSON in {path}: {e}") from e
    except RecursionError as e:
        raise SchemaParseError(f"Schema file {path} is nested too deeply") from e

    logger.debug("Parsing schema file %s", path)
    try:
        return SchemaParser().parse(raw)
    except SchemaParseError as e:
        raise SchemaParseError(f"{path}: {e}") from e


def _json_type(value: Any) -> str:
    """Name a decoded JSON value's type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _type_names(types: tuple[type, ...]) -> str:
    names = {bool: "boolean", int: "number", float: "number", str: "string"}
    return " or ".join(sorted({names[t] for t in types}))
