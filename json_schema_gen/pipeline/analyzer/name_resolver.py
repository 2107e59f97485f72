"""
Name resolver for Go identifiers.

Converts snake_case schema keys to exported Go names, applying an
optional override table first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from ..errors import NameMapError

logger = logging.getLogger(__name__)

NameMap = Mapping[str, str]


def load_name_map(path: str | Path) -> NameMap:
    """
    Load a name override file.

    Each line holds `<raw_key> <replacement>` separated by whitespace.
    Lines with fewer than two tokens are skipped and the last occurrence
    of a key wins.

    Args:
        path: Path to the override file

    Returns:
        A read-only mapping from raw key to replacement

    Raises:
        NameMapError: If the file cannot be read
    """
    mapping: dict[str, str] = {}
    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                tokens = line.split()
                if len(tokens) < 2 or tokens[0].startswith("#"):
                    continue
                mapping[tokens[0]] = tokens[1]
    except OSError as e:
        raise NameMapError(f"Cannot read name map {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise NameMapError(f"Name map {path} is not valid UTF-8: {e}") from e

    logger.debug("Loaded %d name overrides from %s", len(mapping), path)
    return MappingProxyType(mapping)


def snake_to_camel(text: str) -> str:
    """Capitalize every `_`-separated segment and join them.

    Examples:
        "sub_domain" -> "SubDomain"
        "bidfloorcur" -> "Bidfloorcur"
        "w_min" -> "WMin"
    """
    return "".join(segment[:1].upper() + segment[1:] for segment in text.split("_"))


class NameResolver:
    """Resolves schema keys to exported Go names."""

    def __init__(self, name_map: NameMap | None = None):
        """
        Initialize the resolver.

        Args:
            name_map: Optional override table, applied before case conversion
        """
        self.name_map: NameMap = MappingProxyType(dict(name_map or {}))

    def resolve(self, raw_name: str) -> str:
        """Map a property or definition key to an exported identifier."""
        name = snake_to_camel(self.name_map.get(raw_name, raw_name))
        if name.endswith("Id"):
            name = name[: -len("Id")] + "ID"
        return name
