"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "quoteflow.yaml"

DEFAULT_CUSTOMER_ID: str = "customer_001"
DEFAULT_VIP_CUSTOMERS: tuple[str, ...] = ("customer_001", "customer_vip_001")
DEFAULT_CURRENCY_SYMBOL: str = "R$"
DEFAULT_LOG_LEVEL: str = "INFO"

VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {
        "customer_id",
        "vip_customers",
        "rules_dir",
        "currency_symbol",
        "log_level",
    }
)
