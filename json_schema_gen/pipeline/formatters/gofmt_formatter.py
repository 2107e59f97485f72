"""
gofmt formatter for Go code.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from ..config import FormatterConfig

logger = logging.getLogger(__name__)


class GofmtFormatter:
    """Formatter using gofmt for Go code."""

    def __init__(self, command: str = "gofmt"):
        self.command = command
        self._available = None

    def is_available(self) -> bool:
        """Check if gofmt is on the PATH."""
        if self._available is None:
            self._available = shutil.which(self.command) is not None
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Go code using gofmt.

        Args:
            code: Go source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged when gofmt is missing or fails
        """
        if not config.enabled:
            return code
        if not self.is_available():
            logger.warning("%s not found, leaving output unformatted", self.command)
            return code

        try:
            result = subprocess.run(
                [self.command],
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            logger.warning("%s failed: %s", self.command, e)
            return code

        if result.returncode != 0:
            logger.warning("%s rejected the generated code: %s", self.command, result.stderr.strip())
            return code
        return result.stdout
