from __future__ import annotations

from typing import Any

MM = float

# Tolerance for comparing dimensions built from decimal inputs.
EPS = 1e-6


def parse_float(value: Any) -> float:
    """Parse a dimension that may come as a number or as text with a decimal comma."""
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        raise ValueError("empty input")
    text = text.replace(",", ".")
    return float(text)


def parse_int(value: Any) -> int:
    number = parse_float(value)
    if not number.is_integer():
        raise ValueError(f"not an integer: {value!r}")
    return int(number)


def format_float(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}"
