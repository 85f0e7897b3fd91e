"""Quantity parsing and formatting helper tests."""

from __future__ import annotations

import pytest

from larder.planner.formatting import format_line_quantity, format_number, parse_numeric


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (500.0, "500"),
        (3, "3"),
        (2.5, "2.5"),
        (0.125, "0.13"),
        (0.625, "0.63"),
        (-0.125, "-0.13"),
        (1.005, "1"),
        (1.999, "2"),
        (10.10, "10.1"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    ("quantity", "expected"),
    [(2, 2.0), ("3", 3.0), ("-1.5", -1.5), (".5", 0.5), ("1e2", 100.0), (True, None), ("two", None)],
)
def test_parse_numeric(quantity, expected):
    assert parse_numeric(quantity) == expected


@pytest.mark.parametrize(
    ("quantity", "unit", "default_unit", "expected"),
    [
        (200, "g", None, "200 g"),
        (3, "count", None, "3"),
        (2, None, "tbsp", "2 tbsp"),
        (2.0, None, None, "2"),
        ("a pinch", None, None, "a pinch"),
        (None, "g", None, "g"),
        (None, None, "count", ""),
        ("", None, None, ""),
    ],
)
def test_format_line_quantity(quantity, unit, default_unit, expected):
    assert format_line_quantity(quantity, unit, default_unit) == expected
