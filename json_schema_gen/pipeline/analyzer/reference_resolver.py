"""
Reference resolver for $ref resolution.

Only local references into the document's `definitions` are supported.
"""

from __future__ import annotations

from ..errors import UnsupportedSchemaConstructError

DEFINITIONS_PREFIX = "#/definitions/"


class ReferenceResolver:
    """Resolves $ref paths to definition names."""

    def is_local(self, ref_path: str) -> bool:
        """Check whether a $ref points into the local definitions."""
        return ref_path.startswith(DEFINITIONS_PREFIX) and len(ref_path) > len(DEFINITIONS_PREFIX)

    def definition_name(self, ref_path: str, source_path: str = "") -> str:
        """
        Resolve a $ref to the raw key of the definition it names.

        Args:
            ref_path: The $ref value, e.g. "#/definitions/site"
            source_path: Location of the referring node (for error messages)

        Returns:
            The definition key, e.g. "site"

        Raises:
            UnsupportedSchemaConstructError: If the reference is not local
        """
        if not self.is_local(ref_path):
            raise UnsupportedSchemaConstructError(f"Unsupported $ref {ref_path!r}: only {DEFINITIONS_PREFIX}<name> is resolved", source_path)
        return ref_path[len(DEFINITIONS_PREFIX) :]
