"""Config data model for Quoteflow."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quoteflow.constants.config import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_CUSTOMER_ID,
    DEFAULT_LOG_LEVEL,
    DEFAULT_VIP_CUSTOMERS,
)


@dataclass(frozen=True)
class QuoteflowConfig:
    """Resolved quoteflow config.

    ``rules_dir`` is None when the bundled rules should be used.
    """

    customer_id: str = DEFAULT_CUSTOMER_ID
    vip_customers: tuple[str, ...] = DEFAULT_VIP_CUSTOMERS
    rules_dir: Path | None = None
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    log_level: str = DEFAULT_LOG_LEVEL
