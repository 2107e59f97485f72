"""
Analyzer module.

Contains name resolution, type mapping and post-processing of the
declaration graph.
"""

from __future__ import annotations

from .ir_nodes import CodeFile, FieldDef, GoType, TagEntry, TypeDecl, TypeKind
from .name_resolver import NameMap, NameResolver, load_name_map
from .post_processor import PostProcessor
from .type_mapper import TypeMapper

__all__ = [
    "CodeFile",
    "FieldDef",
    "GoType",
    "TagEntry",
    "TypeDecl",
    "TypeKind",
    "NameMap",
    "NameResolver",
    "load_name_map",
    "PostProcessor",
    "TypeMapper",
]
