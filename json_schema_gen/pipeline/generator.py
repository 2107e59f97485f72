"""
Pipeline generator.

Runs every phase for a batch of schema files:

1. Parse each file into a `Schema` tree
2. Map each tree to Go declarations
3. Post-process the concatenated declarations once
4. Render the sorted collection as Go source
5. Optionally format the result with gofmt
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .analyzer import NameMap, NameResolver, PostProcessor, TypeDecl, TypeMapper
from .analyzer.ir_nodes import CodeFile
from .backends import GoBackend
from .config import CodeGeneratorConfig, OutputMode
from .formatters import GofmtFormatter
from .output import AtomicWriter
from .schema_ast import load_schema

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates one Go file from a set of JSON Schema files."""

    def __init__(self, config: CodeGeneratorConfig | None = None, name_map: NameMap | None = None):
        """
        Initialize the generator.

        Args:
            config: Code generation configuration
            name_map: Optional raw-name overrides for the name resolver
        """
        self.config = config or CodeGeneratorConfig()
        self.name_resolver = NameResolver(name_map)
        self.type_mapper = TypeMapper(self.name_resolver, self.config)
        self.post_processor = PostProcessor(self.config)
        self.backend = GoBackend(self.config)
        self.formatter = GofmtFormatter(self.config.formatter.command)

    def collect_decls(self, path: str | Path) -> list[TypeDecl]:
        """Parse one schema file and map it to declarations."""
        schema = load_schema(path)
        decls = self.type_mapper.map_schema(schema.id, schema)
        logger.info("Collected %d declarations from %s", len(decls), path)
        return decls

    def build(self, paths: Iterable[str | Path]) -> CodeFile:
        """
        Map all files and post-process the result.

        Files are processed in order; the first error aborts the run.
        """
        decls: list[TypeDecl] = []
        for path in paths:
            decls.extend(self.collect_decls(path))

        return CodeFile(
            package_name=self.config.package_name,
            type_decls=self.post_processor.process(decls),
            imports=list(self.config.imports),
        )

    def generate(self, paths: Iterable[str | Path]) -> str:
        """Generate Go source for a batch of schema files."""
        code = self.backend.generate(self.build(paths))
        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter)
        return code

    def write(self, paths: Iterable[str | Path], output: str | Path) -> None:
        """Generate and write the Go file, honoring the output mode."""
        code = self.generate(paths)
        output_config = self.config.output
        writer = AtomicWriter()

        if output_config.mode == OutputMode.FORCE:
            writer.write(Path(output), code, output_config.validate_before_write)
        else:
            writer.write_if_not_exists(Path(output), code, output_config.validate_before_write)
