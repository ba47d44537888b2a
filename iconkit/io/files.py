"""Thin UTF-8 text file helpers used by the build scripts."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

_ENCODING = "utf-8"


def file_exists(path: str | Path) -> bool:
    """Return ``True`` when *path* exists on disk."""
    return Path(path).exists()


def reset_file(file_name: str, output_directory: str | Path) -> Path:
    """Truncate *file_name* inside *output_directory* to an empty file."""
    return write_file("", file_name, output_directory)


def read_file(path: str | Path, base_dir: str | Path | None = None) -> str:
    """Read *path*, resolving relative paths against *base_dir*.

    Without *base_dir* relative paths resolve against the current working
    directory, which build scripts run from the repository root.
    """
    target = Path(base_dir if base_dir is not None else Path.cwd()) / path
    return target.read_text(encoding=_ENCODING)


def append_file(content: str, file_name: str, output_directory: str | Path) -> Path:
    """Append *content* to *file_name* inside *output_directory*."""
    path = Path(output_directory) / file_name
    with path.open("a", encoding=_ENCODING) as handle:
        handle.write(content)
    return path


def write_file(content: str, file_name: str, output_directory: str | Path) -> Path:
    """Replace the contents of *file_name* inside *output_directory*."""
    path = Path(output_directory) / file_name
    path.write_text(content, encoding=_ENCODING)
    return path


def write_file_if_not_exists(
    content: str, file_name: str, output_directory: str | Path
) -> bool:
    """Write *content* only when the target is missing; return whether it wrote."""
    if (Path(output_directory) / file_name).exists():
        return False
    write_file(content, file_name, output_directory)
    return True


def read_svg_directory(directory: str | Path, file_extension: str = ".svg") -> list[str]:
    """Return the sorted file names in *directory* ending in *file_extension*."""
    return sorted(
        entry.name
        for entry in Path(directory).iterdir()
        if entry.is_file() and entry.suffix == file_extension
    )


def read_svg(file_name: str, directory: str | Path) -> str:
    return (Path(directory) / file_name).read_text(encoding=_ENCODING)


def write_svg_file(file_name: str, output_directory: str | Path, content: str) -> Path:
    return write_file(content, file_name, output_directory)


def get_current_dir_path(current_path: str | Path) -> Path:
    """Return the directory containing *current_path* (a path or ``file://`` URL)."""
    value = str(current_path)
    if value.startswith("file:"):
        value = url2pathname(urlparse(value).path)
    return Path(value).resolve().parent
