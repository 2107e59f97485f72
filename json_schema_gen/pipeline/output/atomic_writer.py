"""
Atomic file writer for generated Go code.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written output file.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputError

logger = logging.getLogger(__name__)

_PACKAGE_CLAUSE = re.compile(r"^package [A-Za-z_][A-Za-z0-9_]*$", re.MULTILINE)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_go: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_go: Optional validation function for Go code
        """
        self._validate_go = validate_go or self._default_validate_go

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputError: If validation fails or the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise OutputError(f"Cannot write {path}: {e}") from e

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_go(content)

            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise OutputError(f"Cannot write {path}: {e}") from e
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.debug("Wrote %d bytes to %s", len(content), path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            OutputError: If the file already exists or validation fails
        """
        path = Path(path)
        if path.exists():
            raise OutputError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, validate)

    def _default_validate_go(self, content: str) -> None:
        """Default Go validation.

        Raises:
            OutputError: If validation fails
        """
        # Basic structural checks, no full parsing
        if not _PACKAGE_CLAUSE.search(content):
            raise OutputError("Generated Go code is missing a package clause")

        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise OutputError(f"Generated Go code has unbalanced braces: {open_braces} open, {close_braces} close")
