"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from .gofmt_formatter import GofmtFormatter

__all__ = [
    "GofmtFormatter",
]
