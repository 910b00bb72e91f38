"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "QUOTEFLOW"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ QUOTEFLOW",
    "     // rules-driven quotes",
)
QUOTE_SUMMARY_TITLE: str = "Resumo do orçamento"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} quote engine"))
