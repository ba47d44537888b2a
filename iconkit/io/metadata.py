"""Reading and writing icon metadata files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from .models import METADATA_EXTENSION, IconRecord

logger = logging.getLogger(__name__)

JSON_INDENT = 2


class MetadataError(ValueError):
    """Raised when a metadata file is not a valid JSON object."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Metadata file {path} is malformed: {detail}")
        self.path = path


def parse_metadata(path: Path) -> Dict[str, Any]:
    """Parse the metadata file at *path*, preserving key order."""
    text = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataError(path, str(exc)) from exc
    if not isinstance(payload, dict):
        raise MetadataError(path, "expected a JSON object")
    logger.debug("Parsed metadata %s (%d keys)", path, len(payload))
    return payload


def read_metadata(file_name: str, directory: str | Path) -> Dict[str, Any]:
    """Return the parsed metadata stored in *file_name* inside *directory*."""
    return parse_metadata(Path(directory) / file_name)


def read_all_metadata(directory: str | Path) -> Dict[str, Dict[str, Any]]:
    """Return a map of ``name -> metadata`` for every JSON file in *directory*."""
    root = Path(directory)
    entries = sorted(
        path for path in root.iterdir() if path.is_file() and path.suffix == METADATA_EXTENSION
    )
    return {path.stem: parse_metadata(path) for path in entries}


def write_metadata(path: Path, metadata: Mapping[str, Any]) -> Path:
    """Write *metadata* to *path* as pretty-printed JSON and return the path."""
    serialised = json.dumps(metadata, indent=JSON_INDENT, ensure_ascii=False)
    path.write_text(serialised + "\n", encoding="utf-8")
    return path


def load_icon_record(icons_dir: str | Path, name: str) -> IconRecord:
    """Return the :class:`IconRecord` for *name* from its metadata file."""
    path = Path(icons_dir) / f"{name}{METADATA_EXTENSION}"
    return IconRecord(name=name, metadata=parse_metadata(path))
