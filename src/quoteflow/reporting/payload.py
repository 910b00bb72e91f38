"""JSON payloads for quote output."""

from __future__ import annotations

import json
from typing import Any

from quoteflow.controllers import BudgetSummary
from quoteflow.model import FormFieldConfig, Product


def build_quote_payload(summary: BudgetSummary, fields: tuple[FormFieldConfig, ...] = ()) -> dict[str, Any]:
    """Return the JSON-ready representation of a quote."""
    payload = summary.to_dict()
    payload["fields"] = [form_field.to_dict() for form_field in fields]
    return payload


def build_products_payload(products: list[Product]) -> list[dict[str, Any]]:
    return [product.to_dict() for product in products]


def dumps(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, sort_keys=True)
