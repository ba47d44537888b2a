"""
Pytest configuration and shared fixtures for the icon helper tests.
"""

import json
from pathlib import Path

import pytest


SIMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">\n'
    '  <path d="M3 9l9-7 9 7v11a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z" />\n'
    '  <polyline points="9 22 9 12 15 12 15 22" />\n'
    "</svg>\n"
)


class RecordingVcs:
    """Version-control stand-in that renames files on disk and records calls."""

    def __init__(self):
        self.calls = []

    def move(self, old_path, new_path):
        self.calls.append(("move", Path(old_path).name, Path(new_path).name))
        Path(old_path).rename(new_path)

    def stage(self, path):
        self.calls.append(("stage", Path(path).name))


@pytest.fixture
def vcs():
    return RecordingVcs()


@pytest.fixture
def icons_dir(tmp_path):
    """
    Provide an icons directory and a helper to add icon pairs to it.

    Returns:
        Tuple of (directory, add_icon) where add_icon(name, metadata, svg)
        writes ``name.svg`` and ``name.json``.
    """
    directory = tmp_path / "icons"
    directory.mkdir()

    def add_icon(name, metadata=None, svg=SIMPLE_SVG):
        (directory / f"{name}.svg").write_text(svg, encoding="utf-8")
        if metadata is not None:
            (directory / f"{name}.json").write_text(
                json.dumps(metadata, indent=2), encoding="utf-8"
            )

    return directory, add_icon


def read_json(path):
    return json.loads(Path(path).read_text(encoding="utf-8"))
