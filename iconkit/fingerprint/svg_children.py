"""Extract the drawable children of an SVG document as hashable entities."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from ..io.models import Entity

logger = logging.getLogger(__name__)


class SvgParseError(ValueError):
    """Raised when SVG markup cannot be parsed."""


def parse_svg_children(svg_text: str) -> list[Entity]:
    """Return the direct children of the root ``<svg>`` element as entities."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as exc:
        raise SvgParseError(f"Invalid SVG markup: {exc}") from exc
    if _local_name(root.tag).lower() != "svg":
        raise SvgParseError(f"Root element is <{_local_name(root.tag)}>, expected <svg>")

    children = [
        Entity(
            name=_local_name(child.tag),
            attributes={_local_name(key): value for key, value in child.attrib.items()},
        )
        for child in root
        if isinstance(child.tag, str)
    ]
    logger.debug("Extracted %d children from SVG", len(children))
    return children


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]
