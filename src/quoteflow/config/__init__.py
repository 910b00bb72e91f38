"""Quoteflow configuration."""

from .loader import load_config
from .model import QuoteflowConfig

__all__ = ["QuoteflowConfig", "load_config"]
