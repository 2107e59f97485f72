"""
Schema AST module.

Contains the node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import Schema, StringType, TypeField, TypeList
from .parser import SchemaParser, load_schema

__all__ = [
    "Schema",
    "StringType",
    "TypeList",
    "TypeField",
    "SchemaParser",
    "load_schema",
]
