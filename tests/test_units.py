import pytest

from skyline_palletizer.units import format_float, parse_float, parse_int


def test_parse_float_accepts_comma():
    assert parse_float("12,5") == 12.5


def test_parse_float_strips_whitespace():
    assert parse_float("  10.0 ") == 10.0


def test_parse_float_passes_numbers_through():
    assert parse_float(7) == 7.0


def test_parse_float_rejects_empty():
    with pytest.raises(ValueError):
        parse_float("")


def test_parse_int_rejects_fractions():
    assert parse_int("3") == 3
    with pytest.raises(ValueError):
        parse_int("2,5")


def test_format_float():
    assert format_float(3.14159) == "3.14"
