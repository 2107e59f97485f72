"""
Error hierarchy for the schema-to-Go pipeline.

Every failure aborts the whole run; nothing here is recovered locally.
"""

from __future__ import annotations


class SchemaGenError(Exception):
    """Base class for all pipeline errors."""


class SchemaParseError(SchemaGenError):
    """Input is not valid JSON or does not have the expected schema shape."""


class UnsupportedSchemaConstructError(SchemaGenError):
    """A schema node matches none of the mapping rules."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class NameMapError(SchemaGenError):
    """The name override file cannot be read."""


class OutputError(SchemaGenError):
    """Generated code could not be validated or written."""
