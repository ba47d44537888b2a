"""
Unit tests for string case conversion.
"""

import pytest

from iconkit.text.casing import to_camel_case, to_kebab_case, to_pascal_case


class TestToCamelCase:
    """Tests for to_camel_case."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("arrow-up-right", "arrowUpRight"),
            ("Home", "home"),
            ("align_center", "alignCenter"),
            ("chevron  down", "chevronDown"),
            ("a-_b", "aB"),
            ("circle", "circle"),
            ("", ""),
        ],
    )
    def test_conversions(self, value, expected):
        assert to_camel_case(value) == expected


class TestToPascalCase:
    """Tests for to_pascal_case."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("arrow-up-right", "ArrowUpRight"),
            ("home", "Home"),
            ("Home", "Home"),
            ("", ""),
        ],
    )
    def test_conversions(self, value, expected):
        assert to_pascal_case(value) == expected


class TestToKebabCase:
    """Tests for to_kebab_case."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("ArrowUpRight", "arrow-up-right"),
            ("arrowUpRight", "arrow-up-right"),
            ("battery2Full", "battery2-full"),
            ("home", "home"),
        ],
    )
    def test_conversions(self, value, expected):
        assert to_kebab_case(value) == expected

    def test_round_trip_from_pascal(self):
        """Kebab names should survive a Pascal round trip."""
        assert to_kebab_case(to_pascal_case("file-plus-2")) == "file-plus2"
