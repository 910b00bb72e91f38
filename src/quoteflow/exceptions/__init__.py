"""Shared exception hierarchy for Quoteflow."""

from __future__ import annotations

from .base import QuoteflowError
from .catalog import CatalogError
from .config import ConfigError
from .rules import RuleDefinitionError

__all__ = [
    "CatalogError",
    "ConfigError",
    "QuoteflowError",
    "RuleDefinitionError",
]
