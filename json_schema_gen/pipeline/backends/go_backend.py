"""
Go code generation backend.

Renders type declarations as Go source with gofmt-style column alignment.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import CodeFile, TypeDecl, TypeKind
from .base import CodeBackend


class GoBackend(CodeBackend):
    """Go code generation backend."""

    TEMPLATE_LANG = "go"
    FILE_EXTENSION = "go"

    def generate(self, code_file: CodeFile) -> str:
        """Generate a Go file from a declaration collection."""
        prefix = self.prefix_template.render(
            generation_comment=self.generation_comment(),
            package_name=code_file.package_name,
            imports=code_file.imports,
        )
        parts = [prefix.rstrip("\n") + "\n"]
        for decl in code_file.type_decls:
            rendered = self.decl_template.render(self._prepare_decl_context(decl))
            parts.append("\n" + rendered.rstrip("\n") + "\n")
        return "".join(parts)

    def _prepare_decl_context(self, decl: TypeDecl) -> dict[str, Any]:
        """
        Prepare the template context for a declaration.

        Struct members are padded so names, types and tags line up the
        way gofmt aligns them.
        """
        if decl.type.kind != TypeKind.STRUCT:
            return {"is_struct": False, "name": decl.name, "type": decl.type.render()}

        fields = decl.type.fields
        name_width = max((len(f.name) for f in fields), default=0)
        type_width = max((len(f.type.render()) for f in fields), default=0)

        field_contexts = []
        for f in fields:
            tag = f.render_tag()
            go_type = f.type.render()
            field_contexts.append(
                {
                    "name": f.name.ljust(name_width),
                    "type": go_type.ljust(type_width) if tag else go_type,
                    "tag": f" `{tag}`" if tag else "",
                }
            )

        return {"is_struct": True, "name": decl.name, "fields": field_contexts}
