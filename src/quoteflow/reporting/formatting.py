"""Number formatting for quote output."""

from __future__ import annotations

from quoteflow.constants.config import DEFAULT_CURRENCY_SYMBOL


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format *amount* with two decimals, e.g. ``R$ 1234.56`` or ``-R$ 15.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {abs(amount):.2f}"


def format_signed_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Like format_currency but always shows the sign of non-zero amounts."""
    if amount > 0:
        return f"+{format_currency(amount, symbol)}"
    return format_currency(amount, symbol)


def format_percentage(value: float | None) -> str:
    if value is None:
        return ""
    return f"{value:.1f}%"
