"""Shared helper functions."""

from .numbers import parse_float, parse_int

__all__ = ["parse_float", "parse_int"]
