"""
Configuration for the schema-to-Go pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


class UnresolvedRefPolicy(str, Enum):
    """What to do with a field naming a type that is neither declared nor built in."""

    POINTER = "pointer"  # Mark it optional, like a struct reference
    VALUE = "value"  # Keep it as a plain value
    ERROR = "error"  # Fail the run


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for post-processing formatters."""

    # Whether formatting is enabled
    enabled: bool = False

    # Formatter executable
    command: str = "gofmt"


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Go package clause of the generated file
    package_name: str = "openrtb"

    # Import paths of the generated file
    imports: list[str] = field(default_factory=lambda: ["h12.io/decimal"])

    # Serialization encodings that get a struct tag entry per field
    encodings: list[str] = field(default_factory=lambda: ["json", "yaml"])

    # Fixed-point identifier for monetary numbers
    decimal_ident: str = "decimal.D"

    # Identifier for 0/1 integers used as booleans
    bool_int_ident: str = "BoolInt"

    # Identifier for bare objects
    any_ident: str = "interface{}"

    # Declarations that only exist to name primitive aliases
    synthetic_types: list[str] = field(default_factory=lambda: ["PositiveInt", "BooleanInt"])

    # Handling of field identifiers that resolve to nothing known
    unresolved_ref_policy: UnresolvedRefPolicy = UnresolvedRefPolicy.POINTER

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Command line shown in the generation comment
    generation_command: str = "json_schema_gen"

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    def builtin_idents(self) -> set[str]:
        """Identifiers that never name a generated declaration."""
        return {
            "string",
            "int",
            "bool",
            "float32",
            "float64",
            self.bool_int_ident,
            self.decimal_ident,
            self.any_ident,
        }

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif k == "unresolved_ref_policy":
                config.unresolved_ref_policy = UnresolvedRefPolicy(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "package_name": self.package_name,
            "imports": self.imports,
            "encodings": self.encodings,
            "decimal_ident": self.decimal_ident,
            "bool_int_ident": self.bool_int_ident,
            "any_ident": self.any_ident,
            "synthetic_types": self.synthetic_types,
            "unresolved_ref_policy": self.unresolved_ref_policy.value,
            "add_generation_comment": self.add_generation_comment,
            "generation_command": self.generation_command,
            "formatter": {
                "enabled": self.formatter.enabled,
                "command": self.formatter.command,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }
