"""Data models shared across the icon tooling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

ARTWORK_EXTENSION = ".svg"
METADATA_EXTENSION = ".json"


@dataclass(slots=True, frozen=True)
class Entity:
    """A named, attributed node (e.g. an SVG ``<path>``) used as hashing input."""

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class IconRecord:
    """An icon's artwork file paired with its metadata file."""

    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def aliases(self) -> List[str]:
        aliases = self.metadata.get("aliases")
        if not isinstance(aliases, list):
            return []
        return list(aliases)

    @property
    def artwork_name(self) -> str:
        return f"{self.name}{ARTWORK_EXTENSION}"

    @property
    def metadata_name(self) -> str:
        return f"{self.name}{METADATA_EXTENSION}"


@dataclass(slots=True)
class DuplicateGroup:
    """Children of one icon that share a fingerprint."""

    icon: str
    fingerprint: str
    indexes: List[int]


@dataclass(slots=True)
class AliasIssue:
    """A problem found while checking alias consistency."""

    icon: str
    alias: str
    reason: str
