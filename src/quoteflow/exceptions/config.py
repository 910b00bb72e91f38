"""Configuration-related exceptions."""

from __future__ import annotations

from quoteflow.exceptions.base import QuoteflowError


class ConfigError(QuoteflowError, ValueError):
    """Raised when quoteflow configuration is invalid."""
