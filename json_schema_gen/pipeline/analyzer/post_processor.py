"""
Post-processing of the merged declaration list.

Runs once over the declarations of all input files:

1. Dedup: keep the first declaration per name
2. Pointer inference: struct-valued fields become `*T`
3. Filter: drop synthetic wrapper declarations
4. Sort by name
"""

from __future__ import annotations

import dataclasses
import logging

from ..config import CodeGeneratorConfig, UnresolvedRefPolicy
from ..errors import UnsupportedSchemaConstructError
from .ir_nodes import FieldDef, TypeDecl, TypeKind, index_by_name

logger = logging.getLogger(__name__)


class PostProcessor:
    """Dedups, annotates and filters a declaration list."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()
        self.builtin_idents = self.config.builtin_idents()

    def process(self, decls: list[TypeDecl]) -> list[TypeDecl]:
        """
        Run all passes.

        Args:
            decls: Declarations from every input file, in input order

        Returns:
            Unique, pointer-annotated, filtered declarations sorted by name
        """
        result = self.dedup(decls)
        result = self.infer_pointers(result)
        result = self.filter_synthetic(result)
        return sorted(result, key=lambda decl: decl.name)

    def dedup(self, decls: list[TypeDecl]) -> list[TypeDecl]:
        """Keep the first declaration for each name."""
        index = index_by_name(decls)
        dropped = len(decls) - len(index)
        if dropped:
            logger.debug("Dropped %d duplicate declarations", dropped)
        return list(index.values())

    def infer_pointers(self, decls: list[TypeDecl]) -> list[TypeDecl]:
        """
        Mark fields that reference struct declarations as pointers.

        Returns new declarations; the input list is left untouched.
        """
        index = index_by_name(decls)
        result = []
        for decl in decls:
            if decl.type.kind != TypeKind.STRUCT:
                result.append(decl)
                continue
            fields = tuple(self._annotate_field(decl.name, f, index) for f in decl.type.fields)
            result.append(dataclasses.replace(decl, type=dataclasses.replace(decl.type, fields=fields)))
        return result

    def filter_synthetic(self, decls: list[TypeDecl]) -> list[TypeDecl]:
        """Drop declarations that only name primitive aliases."""
        synthetic = set(self.config.synthetic_types)
        result = [decl for decl in decls if decl.name not in synthetic]
        if len(result) != len(decls):
            logger.debug("Filtered %d synthetic declarations", len(decls) - len(result))
        return result

    def _annotate_field(self, decl_name: str, field: FieldDef, index: dict[str, TypeDecl]) -> FieldDef:
        if field.type.kind != TypeKind.IDENT or field.type.is_pointer:
            return field

        target = index.get(field.type.ident)
        if target is not None:
            if target.type.kind != TypeKind.STRUCT:
                return field
        elif field.type.ident in self.builtin_idents:
            return field
        else:
            match self.config.unresolved_ref_policy:
                case UnresolvedRefPolicy.VALUE:
                    return field
                case UnresolvedRefPolicy.ERROR:
                    raise UnsupportedSchemaConstructError(f"Field {decl_name}.{field.name} references unknown type {field.type.ident!r}")
            logger.debug("Field %s.%s references unknown type %s", decl_name, field.name, field.type.ident)

        logger.debug("Field %s.%s becomes a pointer to %s", decl_name, field.name, field.type.ident)
        return dataclasses.replace(field, type=field.type.pointer())
