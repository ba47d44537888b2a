"""Whitespace minification for SVG markup."""

from __future__ import annotations

import re
from pathlib import Path

_BETWEEN_TAGS = re.compile(r">[\r\n ]+<")
_TAG_OR_WHITESPACE = re.compile(r"(<.*?>)|\s+")


def minify_svg(text: str | None) -> str:
    """Collapse whitespace in *text* while leaving tag contents untouched."""
    if not text:
        return ""
    collapsed = _BETWEEN_TAGS.sub("><", text)
    collapsed = _TAG_OR_WHITESPACE.sub(lambda match: match.group(1) or " ", collapsed)
    return collapsed.strip()


def minify_file(path: str | Path) -> bool:
    """Minify the SVG at *path* in place and return whether it changed."""
    target = Path(path)
    content = target.read_text(encoding="utf-8")
    minified = minify_svg(content)
    if minified == content:
        return False
    target.write_text(minified, encoding="utf-8")
    return True
