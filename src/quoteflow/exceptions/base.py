"""Root exception type."""

from __future__ import annotations


class QuoteflowError(Exception):
    """Base class for all errors raised by Quoteflow."""
