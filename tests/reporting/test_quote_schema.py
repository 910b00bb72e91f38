"""Tests for JSON Schema validation of quote output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from quoteflow.catalog import ProductRepository
from quoteflow.controllers import BudgetController, BudgetSummary
from quoteflow.model import Product
from quoteflow.reporting import build_products_payload, build_quote_payload, dumps

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
QUOTE_SCHEMA_PATH: Path = SCHEMAS_DIR / "quote.schema.json"


@pytest.fixture()
def quote_schema() -> dict[str, Any]:
    """Load the quote JSON Schema."""
    return json.loads(QUOTE_SCHEMA_PATH.read_text(encoding="utf-8"))


@pytest.fixture()
def priced_budget(budget: BudgetController, motor: Product) -> BudgetController:
    budget.select_product(motor)
    budget.update_form_fields({"quantity": "60", "voltage": "220", "delivery_days": "3"})
    return budget


def _summary(budget: BudgetController) -> BudgetSummary:
    summary = budget.get_budget_summary()
    assert summary is not None
    return summary


def test_quote_schema_is_valid_json_schema(quote_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(quote_schema)


def test_quote_payload_matches_schema(quote_schema: dict[str, Any], priced_budget: BudgetController) -> None:
    payload = build_quote_payload(_summary(priced_budget), priced_budget.form_controller.fields)

    jsonschema.validate(instance=json.loads(dumps(payload)), schema=quote_schema)
    assert payload["product"]["id"] == "ind_001"
    assert payload["quantity"] == 60
    assert [field["key"] for field in payload["fields"]][0] == "quantity"


def test_invalid_quote_payload_still_matches_schema(quote_schema: dict[str, Any], budget: BudgetController) -> None:
    budget.select_product_by_id("res_001")

    payload = build_quote_payload(_summary(budget))

    jsonschema.validate(instance=payload, schema=quote_schema)
    assert payload["is_valid"] is False
    assert payload["errors"]


def test_schema_accepts_new_product_type(quote_schema: dict[str, Any], priced_budget: BudgetController) -> None:
    payload = build_quote_payload(_summary(priced_budget))
    payload["product"]["product_type"] = "aerospace"

    jsonschema.validate(instance=payload, schema=quote_schema)


def test_schema_rejects_blank_product_type(quote_schema: dict[str, Any], priced_budget: BudgetController) -> None:
    payload = build_quote_payload(_summary(priced_budget))
    payload["product"]["product_type"] = ""

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=quote_schema)


def test_products_payload(repository: ProductRepository) -> None:
    payload = build_products_payload(repository.find_by_type("corporate"))

    assert [item["id"] for item in payload] == ["corp_001", "corp_002", "corp_003", "corp_004"]
    assert "Plataforma de E-commerce" in dumps(payload)
