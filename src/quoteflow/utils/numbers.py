"""Tolerant number parsing for loosely typed form values."""

from __future__ import annotations

from typing import Any


def parse_float(value: Any, default: float) -> float:
    """Return *value* as a float, or *default* when it is missing or unparseable."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return default


def parse_int(value: Any, default: int) -> int:
    """Return *value* as an int, or *default* when it is not a whole number."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else default
    try:
        return int(str(value).strip())
    except ValueError:
        return default
