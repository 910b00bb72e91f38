"""Quote and catalog output."""

from .formatting import format_currency, format_percentage, format_signed_currency
from .payload import build_products_payload, build_quote_payload, dumps
from .stdout import QuoteReporter, render_product_table

__all__ = [
    "QuoteReporter",
    "build_products_payload",
    "build_quote_payload",
    "dumps",
    "format_currency",
    "format_percentage",
    "format_signed_currency",
    "render_product_table",
]
