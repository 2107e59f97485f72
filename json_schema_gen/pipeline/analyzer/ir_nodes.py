"""
Type declaration graph.

These nodes describe the Go declarations to emit. Fields refer to other
declarations by name only; lookups go through a name index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

POINTER_PREFIX = "*"


class TypeKind(Enum):
    """Kind of Go type."""

    IDENT = "ident"  # string, int, Site, *Site
    ARRAY = "array"  # []T
    STRUCT = "struct"  # struct { ... }


@dataclass(frozen=True)
class TagEntry:
    """One `encoding:"name,omitempty"` struct tag entry."""

    encoding: str
    name: str
    omit_empty: bool = True

    def render(self) -> str:
        suffix = ",omitempty" if self.omit_empty else ""
        return f'{self.encoding}:"{self.name}{suffix}"'


@dataclass(frozen=True)
class GoType:
    """A Go type expression."""

    kind: TypeKind = TypeKind.IDENT

    # Identifier for IDENT, element identifier for ARRAY
    ident: str = ""

    # Struct members, ordered by name
    fields: tuple[FieldDef, ...] = ()

    def __post_init__(self):
        if self.kind == TypeKind.STRUCT and self.ident:
            raise ValueError("A struct type has no identifier")
        if self.kind != TypeKind.STRUCT and self.fields:
            raise ValueError(f"A {self.kind.value} type has no fields")

    @property
    def is_pointer(self) -> bool:
        return self.ident.startswith(POINTER_PREFIX)

    def pointer(self) -> GoType:
        """Return this identifier type marked optional."""
        if self.kind != TypeKind.IDENT:
            raise ValueError(f"Cannot take a pointer to a {self.kind.value} type")
        if self.is_pointer:
            return self
        return GoType(kind=TypeKind.IDENT, ident=POINTER_PREFIX + self.ident)

    def render(self) -> str:
        if self.kind == TypeKind.ARRAY:
            return f"[]{self.ident}"
        if self.kind == TypeKind.STRUCT:
            return "struct"
        return self.ident


@dataclass(frozen=True)
class FieldDef:
    """A struct member."""

    name: str = ""
    type: GoType = field(default_factory=GoType)
    tag: tuple[TagEntry, ...] = ()

    def render_tag(self) -> str:
        return " ".join(entry.render() for entry in self.tag)


@dataclass(frozen=True)
class TypeDecl:
    """A named declaration: `type Name <Type>`."""

    name: str = ""
    type: GoType = field(default_factory=GoType)


@dataclass
class CodeFile:
    """Everything the emitter needs for one Go file."""

    package_name: str = ""
    type_decls: list[TypeDecl] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)


def index_by_name(decls: list[TypeDecl]) -> dict[str, TypeDecl]:
    """Map declaration names to declarations, first occurrence wins."""
    index: dict[str, TypeDecl] = {}
    for decl in decls:
        index.setdefault(decl.name, decl)
    return index
