"""Rule definition exceptions."""

from __future__ import annotations

from quoteflow.exceptions.base import QuoteflowError


class RuleDefinitionError(QuoteflowError, ValueError):
    """Raised when a declarative rule definition is malformed."""
