"""Tests for terminal rendering of quotes and products."""

from __future__ import annotations

import pytest

from quoteflow.catalog import ProductRepository
from quoteflow.controllers import BudgetController
from quoteflow.model import Product
from quoteflow.reporting import (
    QuoteReporter,
    format_currency,
    format_percentage,
    format_signed_currency,
    render_product_table,
)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(1234.5, "R$ 1234.50"), (-15.0, "-R$ 15.00"), (0.0, "R$ 0.00")],
    ids=["positive", "negative", "zero"],
)
def test_format_currency(amount: float, expected: str) -> None:
    assert format_currency(amount) == expected


def test_signed_currency_and_percentage() -> None:
    assert format_signed_currency(660.0) == "+R$ 660.00"
    assert format_signed_currency(-330.0, "US$") == "-US$ 330.00"
    assert format_percentage(15.0) == "15.0%"
    assert format_percentage(None) == ""


def test_render_valid_quote(budget: BudgetController, motor: Product) -> None:
    budget.select_product(motor)
    budget.update_form_fields(
        {
            "quantity": "100",
            "voltage": "380",
            "certification": "ISO 9001",
            "protection_grade": "IP65",
            "power_consumption": "5",
            "delivery_days": "5",
        }
    )
    summary = budget.get_budget_summary()
    assert summary is not None

    text = QuoteReporter(summary, budget.form_controller.fields, color=False).render()

    assert "Resumo do orçamento" in text
    assert "Motor Trifásico 5CV (ind_001)" in text
    assert "Preço base          R$ 3300.00" in text
    assert "Urgency Fee" in text and "+R$ 660.00 (20.0%)" in text
    assert "Preço final         R$ 2970.00" in text
    assert "Economia            R$ 99000.00 (30.0%)" in text
    assert "Situação    válido" in text
    assert "\033[" not in text


def test_render_invalid_quote_lists_errors(budget: BudgetController) -> None:
    budget.select_product_by_id("corp_001")
    summary = budget.get_budget_summary()
    assert summary is not None

    text = QuoteReporter(summary, color=False).render()

    assert "Situação    inválido" in text
    assert "! Quantidade é obrigatório" in text


def test_render_product_table(repository: ProductRepository) -> None:
    table = render_product_table(repository.find_by_type("residential"))

    assert table.count("\n") == 3
    assert "res_002" in table and "R$ 1200.00" in table
    assert render_product_table([]) == "  Nenhum produto encontrado"
