"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import CodeFile
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=False,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.decl_template = self.jinja_env.get_template(f"decl.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, code_file: CodeFile) -> str:
        """
        Generate code from a declaration collection.

        Args:
            code_file: Package name, sorted declarations and imports

        Returns:
            Generated code as a string
        """

    def generation_comment(self) -> str:
        """Header comment marking the file as generated, or empty."""
        if not self.config.add_generation_comment:
            return ""
        return f"Code generated by {self.config.generation_command}; DO NOT EDIT."
