"""Catalog lookup exceptions."""

from __future__ import annotations

from quoteflow.exceptions.base import QuoteflowError


class CatalogError(QuoteflowError, LookupError):
    """Raised when a product cannot be found in the catalog."""
