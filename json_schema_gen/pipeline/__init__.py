"""
Pipeline - JSON Schema to Go type declarations.

1. Phase 1 (Parser): Parse JSON Schema into `Schema` nodes
2. Phase 2 (Type Mapper): Map each document to Go declarations
3. Phase 3 (Post-Processor): Dedup, infer pointers, filter, sort
4. Phase 4 (Backend): Render the declarations as Go source
5. Phase 5 (Formatter): Optional gofmt post-processing
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode, UnresolvedRefPolicy
from .errors import (
    NameMapError,
    OutputError,
    SchemaGenError,
    SchemaParseError,
    UnsupportedSchemaConstructError,
)
from .generator import PipelineGenerator
from .output import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "UnresolvedRefPolicy",
    "SchemaGenError",
    "SchemaParseError",
    "UnsupportedSchemaConstructError",
    "NameMapError",
    "OutputError",
    "AtomicWriter",
]
