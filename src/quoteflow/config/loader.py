"""Config loading and normalization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from quoteflow.config.model import QuoteflowConfig
from quoteflow.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_CUSTOMER_ID,
    DEFAULT_LOG_LEVEL,
    DEFAULT_VIP_CUSTOMERS,
    VALID_LOG_LEVELS,
)
from quoteflow.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> QuoteflowConfig:
    """Load and validate config from ``quoteflow.yaml`` or an explicit path.

    A missing default file yields the defaults; a missing explicit file is an
    error. A relative ``rules_dir`` is resolved against the config file's
    directory.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return QuoteflowConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in set(raw) - CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    customer_id = _ensure_string(raw.get("customer_id", DEFAULT_CUSTOMER_ID), "customer_id")
    currency_symbol = _ensure_string(raw.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL), "currency_symbol")

    log_level = raw.get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {log_level!r}")

    rules_dir_raw = raw.get("rules_dir")
    rules_dir: Path | None = None
    if rules_dir_raw is not None:
        rules_dir = path.parent / _ensure_string(rules_dir_raw, "rules_dir")

    return QuoteflowConfig(
        customer_id=customer_id,
        vip_customers=tuple(
            _ensure_string_list(raw.get("vip_customers", list(DEFAULT_VIP_CUSTOMERS)), "vip_customers")
        ),
        rules_dir=rules_dir,
        currency_symbol=currency_symbol,
        log_level=log_level.upper(),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item.strip() for item in value if item.strip()]
