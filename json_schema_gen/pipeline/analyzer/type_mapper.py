"""
Schema to Go type mapping.

Phase 2 of the pipeline: walk a `Schema` tree and produce the flat list
of Go declarations it defines. Every schema node must match one of the
mapping rules; anything else raises `UnsupportedSchemaConstructError`
and no partial declaration is returned.
"""

from __future__ import annotations

import logging

from ..config import CodeGeneratorConfig
from ..errors import UnsupportedSchemaConstructError
from ..schema_ast.nodes import Schema, TypeList
from .ir_nodes import FieldDef, GoType, TagEntry, TypeDecl, TypeKind
from .name_resolver import NameResolver
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

# Number fields whose names contain these words use the decimal type
DECIMAL_NAME_HINTS = ("price", "floor", "ratio")

# Number fields whose names contain this word keep zero values on encode
MONETARY_NAME_HINT = "price"


class TypeMapper:
    """Maps schema nodes to Go type declarations."""

    def __init__(self, name_resolver: NameResolver, config: CodeGeneratorConfig | None = None):
        """
        Initialize the mapper.

        Args:
            name_resolver: Resolver for exported Go names
            config: Code generation configuration
        """
        self.name_resolver = name_resolver
        self.config = config or CodeGeneratorConfig()
        self.ref_resolver = ReferenceResolver()

    def map_schema(self, id: str, schema: Schema) -> list[TypeDecl]:
        """
        Build the declarations for a schema node and its definitions.

        The node's own declaration comes first, followed by the declarations
        of each entry in `definitions`, recursively.

        Args:
            id: Raw name of the node (document id or definition key)
            schema: The schema node

        Returns:
            Declarations in pre-order
        """
        name = self.name_resolver.resolve(id)
        if not name:
            raise UnsupportedSchemaConstructError("Schema has no id to name its declaration", schema.source_path)

        if schema.properties:
            go_type = self._struct_type(name, schema)
        elif schema.type is not None or schema.ref is not None:
            go_type = self._alias_type(id, schema)
        else:
            raise UnsupportedSchemaConstructError(f"Schema {id!r} has no properties, type or $ref", schema.source_path)

        decls = [TypeDecl(name=name, type=go_type)]

        for def_id, definition in schema.definitions.items():
            decls.extend(self.map_schema(def_id, definition))

        return decls

    def map_type(self, name: str, schema: Schema) -> GoType:
        """
        Map a property schema to a Go type.

        Args:
            name: Raw property name, used by the decimal heuristic
            schema: The property schema

        Returns:
            An IDENT or ARRAY type
        """
        if isinstance(schema.type, TypeList):
            raise UnsupportedSchemaConstructError(f"Type list {list(schema.type.names)} of {name!r} is not supported", schema.source_path)

        type_name = schema.type_name
        if type_name == "array":
            return self._array_type(name, schema)
        if type_name == "object":
            if schema.properties:
                raise UnsupportedSchemaConstructError(f"Inline object {name!r} must be moved to definitions", schema.source_path)
            return GoType(kind=TypeKind.IDENT, ident=self.config.any_ident)
        if type_name == "null":
            raise UnsupportedSchemaConstructError(f"Null type of {name!r} is not supported", schema.source_path)
        if type_name is not None:
            return self.ident_type(name, type_name)

        if schema.ref is not None:
            return self.ident_type(name, self.ref_resolver.definition_name(schema.ref, schema.source_path))

        raise UnsupportedSchemaConstructError(f"Cannot find a Go type for {name!r}", schema.source_path)

    def ident_type(self, name: str, type_name: str) -> GoType:
        """Map a primitive or named type to an identifier type."""
        match type_name:
            case "string":
                ident = "string"
            case "integer" | "positive_int":
                ident = "int"
            case "boolean":
                ident = "bool"
            case "boolean_int":
                ident = self.config.bool_int_ident
            case "number":
                ident = self.config.decimal_ident if is_decimal_name(name) else "float64"
            case _:
                ident = self.name_resolver.resolve(type_name)
        return GoType(kind=TypeKind.IDENT, ident=ident)

    def _alias_type(self, id: str, schema: Schema) -> GoType:
        """Type of a declaration that aliases a primitive, array or reference."""
        if schema.type_name is not None and schema.type_name not in ("array", "object", "null"):
            return self.ident_type(id, schema.type_name)
        return self.map_type(id, schema)

    def _array_type(self, name: str, schema: Schema) -> GoType:
        if schema.items is None:
            raise UnsupportedSchemaConstructError(f"Array {name!r} has no items", schema.source_path)
        item_type = self.map_type(name, schema.items)
        if item_type.kind != TypeKind.IDENT:
            raise UnsupportedSchemaConstructError(f"Array {name!r} of {item_type.kind.value} items is not supported", schema.source_path)
        return GoType(kind=TypeKind.ARRAY, ident=item_type.ident)

    def _struct_type(self, name: str, schema: Schema) -> GoType:
        fields = []
        raw_names: dict[str, str] = {}
        for prop_name, prop in schema.properties.items():
            field = self._field(prop_name, prop)
            if field.name in raw_names:
                raise UnsupportedSchemaConstructError(
                    f"Properties {raw_names[field.name]!r} and {prop_name!r} of {name} both map to field {field.name}",
                    schema.source_path,
                )
            raw_names[field.name] = prop_name
            fields.append(field)
        fields.sort(key=lambda f: f.name)
        return GoType(kind=TypeKind.STRUCT, fields=tuple(fields))

    def _field(self, prop_name: str, prop: Schema) -> FieldDef:
        go_type = self.map_type(prop_name, prop)
        omit_empty = not (prop.type_name == "number" and MONETARY_NAME_HINT in prop_name.lower())
        tag = tuple(TagEntry(encoding=encoding, name=prop_name, omit_empty=omit_empty) for encoding in self.config.encodings)
        return FieldDef(name=self.name_resolver.resolve(prop_name), type=go_type, tag=tag)


def is_decimal_name(name: str) -> bool:
    """Check whether a number field should use the fixed-point type."""
    lowered = name.lower()
    return any(hint in lowered for hint in DECIMAL_NAME_HINTS)
