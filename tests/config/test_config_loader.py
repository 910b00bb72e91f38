"""Tests for quoteflow.yaml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from quoteflow.config import QuoteflowConfig, load_config
from quoteflow.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path) == QuoteflowConfig()


def test_explicit_missing_config_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "other.yaml")


def test_load_config_reads_values(tmp_path: Path) -> None:
    (tmp_path / "quoteflow.yaml").write_text(
        "customer_id: acme\n"
        "vip_customers: [acme, globex]\n"
        "rules_dir: rules\n"
        "currency_symbol: US$\n"
        "log_level: debug\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.customer_id == "acme"
    assert config.vip_customers == ("acme", "globex")
    assert config.rules_dir == tmp_path.resolve() / "rules"
    assert config.currency_symbol == "US$"
    assert config.log_level == "DEBUG"


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    (tmp_path / "quoteflow.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == QuoteflowConfig()


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("- just\n- a list\n", "must be a YAML mapping"),
        ("customer: acme\n", "Unknown config key"),
        ("customer_id: 42\n", "customer_id"),
        ("vip_customers: acme\n", "vip_customers"),
        ("log_level: chatty\n", "log_level"),
        ("rules_dir: [a]\n", "rules_dir"),
        ("customer_id: [unclosed\n", "Invalid YAML"),
    ],
    ids=["not_mapping", "unknown_key", "customer_type", "vip_type", "log_level", "rules_dir_type", "bad_yaml"],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "quoteflow.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)
