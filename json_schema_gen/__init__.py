"""JSON Schema to Go generator

Generates Go type declarations (with json/yaml struct tags) from the
JSON Schema documents of an OpenRTB-style vocabulary.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    FormatterConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaGenError,
    UnresolvedRefPolicy,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "UnresolvedRefPolicy",
    "SchemaGenError",
    "AtomicWriter",
]
