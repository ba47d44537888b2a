"""Rename an icon's artwork and metadata files and keep the old name as an alias.

The workflow validates every precondition before touching the tree. Once the
first file has been moved, any failure propagates as-is and leaves the tree
partially renamed for the operator to inspect; nothing is rolled back.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from ..io.metadata import parse_metadata, write_metadata
from ..io.models import ARTWORK_EXTENSION, METADATA_EXTENSION, IconRecord
from .vcs import GitRepository, VersionControl

logger = logging.getLogger(__name__)


class RenameError(Exception):
    """Base class for fatal rename failures."""


class RenamePreconditionError(RenameError):
    """Raised before any mutation when a file check fails."""

    def __init__(self, path: Path, reason: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason


class TargetExistsError(RenamePreconditionError):
    """The new artwork or metadata file is already present."""

    def __init__(self, path: Path, kind: str) -> None:
        super().__init__(path, "exists", f"{kind} {path} already exists")


class SourceMissingError(RenamePreconditionError):
    """The old artwork or metadata file is missing."""

    def __init__(self, path: Path, kind: str) -> None:
        super().__init__(path, "missing", f"{kind} {path} doesn't exist")


def prune_aliases(aliases: Iterable[str], name: str) -> List[str]:
    """Return *aliases* without *name* and without repeats, order preserved."""
    pruned: List[str] = []
    for alias in aliases:
        if alias == name or alias in pruned:
            continue
        pruned.append(alias)
    return pruned


def set_aliases(metadata: Dict[str, Any], aliases: List[str]) -> Dict[str, Any]:
    """Store *aliases* on *metadata*, dropping the field when the list is empty."""
    if aliases:
        metadata["aliases"] = aliases
    else:
        metadata.pop("aliases", None)
    return metadata


def migrate_aliases(
    metadata: Mapping[str, Any], old_name: str, new_name: str
) -> Dict[str, Any]:
    """Return a copy of *metadata* with *old_name* recorded as an alias of *new_name*."""
    updated = dict(metadata)
    aliases = updated.get("aliases")
    if not isinstance(aliases, list):
        updated["aliases"] = [old_name]
        return updated

    remaining = prune_aliases(aliases, new_name)
    if old_name not in remaining:
        remaining.append(old_name)
    return set_aliases(updated, remaining)


def next_steps(old_name: str, new_name: str) -> List[str]:
    """Return the suggested version-control commands after a rename."""
    return [
        f"git checkout -b rename/{old_name}-to-{new_name};",
        f"git commit -m 'Renamed {old_name} to {new_name}';",
        f"gh pr create --title 'Renamed {old_name} to {new_name}';",
        "git checkout main;",
    ]


def rename_icon(
    icons_dir: str | Path,
    old_name: str,
    new_name: str,
    log_info: bool = True,
    vcs: VersionControl | None = None,
    validate_metadata: bool = True,
) -> IconRecord:
    """Rename icon *old_name* to *new_name* and add the old name as an alias.

    Args:
        icons_dir: Directory holding ``<name>.svg`` and ``<name>.json`` pairs.
        old_name: Current icon name.
        new_name: Target icon name.
        log_info: Print the suggested follow-up commands on success.
        vcs: Collaborator used to move and stage files; defaults to git run
            from *icons_dir*, so the repository holding the icons is used.
        validate_metadata: Parse the old metadata before moving anything so a
            malformed file cannot leave a half-renamed icon behind.

    Returns:
        The renamed :class:`IconRecord` with its migrated metadata.

    Raises:
        TargetExistsError: A file for *new_name* is already present.
        SourceMissingError: A file for *old_name* is missing.
        MetadataError: The metadata file is not a JSON object.
        GitCommandError: git refused a move or stage; the tree may be
            partially renamed.
    """
    root = Path(icons_dir)
    old_artwork = root / f"{old_name}{ARTWORK_EXTENSION}"
    old_metadata = root / f"{old_name}{METADATA_EXTENSION}"
    new_artwork = root / f"{new_name}{ARTWORK_EXTENSION}"
    new_metadata = root / f"{new_name}{METADATA_EXTENSION}"

    if new_artwork.exists():
        raise TargetExistsError(new_artwork, "Icon")
    if new_metadata.exists():
        raise TargetExistsError(new_metadata, "Metadata file")
    if not old_artwork.exists():
        raise SourceMissingError(old_artwork, "Icon")
    if not old_metadata.exists():
        raise SourceMissingError(old_metadata, "Metadata file")
    if validate_metadata:
        parse_metadata(old_metadata)

    repository = vcs if vcs is not None else GitRepository(root)
    repository.move(old_artwork, new_artwork)
    repository.move(old_metadata, new_metadata)

    metadata = migrate_aliases(parse_metadata(new_metadata), old_name, new_name)
    write_metadata(new_metadata, metadata)
    repository.stage(new_metadata)
    logger.debug("Renamed %s to %s in %s", old_name, new_name, root)

    if log_info:
        print("[rename] SUCCESS: Next steps:")
        for line in next_steps(old_name, new_name):
            print(line)

    return IconRecord(name=new_name, metadata=metadata)
