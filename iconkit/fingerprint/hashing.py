"""Short deterministic fingerprints for SVG children and duplicate detection.

The fingerprint is a djb2 variant rendered in base 36 and truncated to six
characters. It is not cryptographic: collisions are possible and are meant
to be read as a quality signal on the icon set, not as an error.
"""

from __future__ import annotations

import json
from typing import Dict, Iterable, List, Sequence

from ..io.models import Entity

DEFAULT_SEED = 5381
HASH_LENGTH = 6

_UINT32_MASK = 0xFFFFFFFF
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def hash_string(value: str, seed: int = DEFAULT_SEED) -> str:
    """Return the six character base-36 djb2 digest of *value*."""
    result = seed & _UINT32_MASK
    for unit in reversed(_utf16_units(value)):
        result = ((result * 33) ^ unit) & _UINT32_MASK
    return _to_base36(result)[:HASH_LENGTH]


def generate_hashed_key(entity: Entity, canonical: bool = True) -> str:
    """Return the fingerprint of an entity's ``[name, attributes]`` pair.

    With *canonical* set, attribute keys are sorted before serialization so
    two entities differing only in attribute order share a key.
    """
    attributes = dict(entity.attributes)
    if canonical:
        attributes = {key: attributes[key] for key in sorted(attributes)}
    serialised = json.dumps(
        [entity.name, attributes], separators=(",", ":"), ensure_ascii=False
    )
    return hash_string(serialised)


def has_duplicated_children(children: Iterable[Entity]) -> bool:
    """Return ``True`` when any two *children* share a fingerprint."""
    seen: set[str] = set()
    for child in children:
        key = generate_hashed_key(child)
        if key in seen:
            return True
        seen.add(key)
    return False


def find_duplicated_children(children: Sequence[Entity]) -> Dict[str, List[int]]:
    """Return ``fingerprint -> indexes`` for every fingerprint seen more than once."""
    positions: Dict[str, List[int]] = {}
    for index, child in enumerate(children):
        positions.setdefault(generate_hashed_key(child), []).append(index)
    return {key: indexes for key, indexes in positions.items() if len(indexes) > 1}


def _utf16_units(value: str) -> List[int]:
    units: List[int] = []
    for char in value:
        code_point = ord(char)
        if code_point > 0xFFFF:
            code_point -= 0x10000
            units.append(0xD800 + (code_point >> 10))
            units.append(0xDC00 + (code_point & 0x3FF))
        else:
            units.append(code_point)
    return units


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits: List[str] = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))
