"""Reporting constants."""

from __future__ import annotations

OUTPUT_FORMAT_TEXT: str = "text"
OUTPUT_FORMAT_JSON: str = "json"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON})

ANSI_GREEN: str = "\033[32m"
ANSI_RED: str = "\033[31m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RESET: str = "\033[0m"

