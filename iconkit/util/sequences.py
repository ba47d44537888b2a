"""Pure helpers for ordered sequences."""

from __future__ import annotations

import random
from typing import Hashable, Iterable, List, Sequence, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def merge_arrays(a: Iterable[H], b: Iterable[H]) -> List[H]:
    """Return the items of *a* then *b* without repeats, keeping first occurrences."""
    seen: set[H] = set()
    merged: List[H] = []
    for item in (*a, *b):
        if item in seen:
            continue
        seen.add(item)
        merged.append(item)
    return merged


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> List[T]:
    """Return a Fisher-Yates shuffled copy of *items*; the input is left untouched."""
    generator = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = generator.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
