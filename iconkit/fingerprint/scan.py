"""Fingerprint every icon in a directory and report duplicated children."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd
from tqdm import tqdm

from ..io.files import read_svg, read_svg_directory
from ..io.models import DuplicateGroup
from .hashing import find_duplicated_children, generate_hashed_key
from .svg_children import parse_svg_children

FINGERPRINT_TABLE = "fingerprints.parquet"


def scan_directory(icons_dir: str | Path) -> list[DuplicateGroup]:
    """Return a :class:`DuplicateGroup` for every repeated child in *icons_dir*."""
    groups: list[DuplicateGroup] = []
    file_names = read_svg_directory(icons_dir)
    for file_name in tqdm(file_names, desc="Checking icons", unit="icon", leave=False):
        children = parse_svg_children(read_svg(file_name, icons_dir))
        duplicates = find_duplicated_children(children)
        icon = Path(file_name).stem
        for fingerprint, indexes in duplicates.items():
            groups.append(DuplicateGroup(icon=icon, fingerprint=fingerprint, indexes=indexes))
    return groups


def fingerprint_rows(icons_dir: str | Path) -> list[Dict[str, Any]]:
    """Return one row per SVG child with its icon, position, tag and fingerprint."""
    rows: list[Dict[str, Any]] = []
    file_names = read_svg_directory(icons_dir)
    for file_name in tqdm(file_names, desc="Fingerprinting", unit="icon", leave=False):
        children = parse_svg_children(read_svg(file_name, icons_dir))
        icon = Path(file_name).stem
        for index, child in enumerate(children):
            rows.append(
                {
                    "icon": icon,
                    "index": index,
                    "tag": child.name,
                    "fingerprint": generate_hashed_key(child),
                }
            )
    return rows


def write_fingerprint_table(rows: Sequence[Dict[str, Any]], out_dir: str | Path) -> Path | None:
    """Persist fingerprint *rows* to ``fingerprints.parquet`` inside *out_dir*."""
    if not rows:
        print("[fingerprints] no rows to write")
        return None

    df = pd.DataFrame(list(rows), columns=["icon", "index", "tag", "fingerprint"])
    table_path = Path(out_dir) / FINGERPRINT_TABLE
    table_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(table_path, index=False, engine="pyarrow")
    collisions = int(df.duplicated(subset=["icon", "fingerprint"], keep=False).sum())
    print(
        f"[fingerprints] wrote {len(df)} rows to {table_path}"
        f" ({collisions} duplicated within an icon)"
    )
    return table_path


def summarise(groups: List[DuplicateGroup]) -> None:
    """Print a console summary of duplicate *groups*."""
    if not groups:
        print("[duplicates] no duplicated children found")
        return
    for group in groups:
        positions = ", ".join(str(index) for index in group.indexes)
        print(f"[duplicates] {group.icon}: children {positions} share key {group.fingerprint}")
    icons = {group.icon for group in groups}
    print(f"[duplicates] {len(groups)} duplicate groups across {len(icons)} icons")
