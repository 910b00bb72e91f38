"""Stable error codes reported by rule file validation."""

from __future__ import annotations

RULE001: str = "RULE001"  # rule file or directory not found / unreadable
RULE002: str = "RULE002"  # rule file has the wrong extension
RULE003: str = "RULE003"  # invalid YAML
RULE004: str = "RULE004"  # rule is not a mapping
RULE005: str = "RULE005"  # unknown top-level key
RULE006: str = "RULE006"  # missing required top-level key
RULE007: str = "RULE007"  # invalid rule id
RULE008: str = "RULE008"  # duplicate rule id
RULE009: str = "RULE009"  # unknown kind
RULE010: str = "RULE010"  # top-level value has the wrong type
RULE011: str = "RULE011"  # unknown param
RULE012: str = "RULE012"  # missing required param
RULE013: str = "RULE013"  # param value has the wrong type
