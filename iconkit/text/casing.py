"""String case conversion for icon and component names."""

from __future__ import annotations

import re

_CAMEL_PATTERN = re.compile(r"^([A-Z])|[\s\-_]+(\w)")
_KEBAB_PATTERN = re.compile(r"([a-z0-9])([A-Z])")


def to_camel_case(value: str) -> str:
    """Return *value* in camelCase, e.g. ``arrow-up-right`` -> ``arrowUpRight``."""

    def _replace(match: re.Match[str]) -> str:
        leading, following = match.group(1), match.group(2)
        if following:
            return following.upper()
        return leading.lower()

    return _CAMEL_PATTERN.sub(_replace, value)


def to_pascal_case(value: str) -> str:
    """Return *value* in PascalCase, e.g. ``arrow-up-right`` -> ``ArrowUpRight``."""
    camel_case = to_camel_case(value)
    return camel_case[:1].upper() + camel_case[1:]


def to_kebab_case(value: str) -> str:
    """Return *value* in kebab-case, e.g. ``arrowUpRight`` -> ``arrow-up-right``."""
    return _KEBAB_PATTERN.sub(r"\1-\2", value).lower()
