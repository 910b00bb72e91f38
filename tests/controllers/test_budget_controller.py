"""Tests for the budget controller and its summary."""

from __future__ import annotations

import logging

import pytest

from quoteflow.controllers import BudgetController, BudgetSummary, ChangeNotifier
from quoteflow.exceptions import CatalogError
from quoteflow.model import PricingResult, Product

VALID_MOTOR_FORM = {
    "quantity": "100",
    "voltage": "380",
    "certification": "ISO 9001",
    "protection_grade": "IP65",
    "power_consumption": "5",
    "delivery_days": "5",
}


def test_available_products_and_type_filter(budget: BudgetController) -> None:
    assert len(budget.available_products) == 12
    assert len(budget.get_products_by_type(None)) == 12
    assert len(budget.get_products_by_type("")) == 12
    assert {product.product_type for product in budget.get_products_by_type("corporate")} == {"corporate"}


def test_select_product_recalculates_before_notifying(budget: BudgetController, motor: Product) -> None:
    seen: list[PricingResult | None] = []
    budget.add_listener(lambda: seen.append(budget.current_pricing))

    budget.select_product(motor)

    assert seen and seen[-1] is not None
    assert budget.current_validation is not None
    assert not budget.current_validation.is_valid
    assert not budget.can_submit


def test_complete_quote_can_be_submitted(
    budget: BudgetController,
    motor: Product,
    caplog: pytest.LogCaptureFixture,
) -> None:
    budget.select_product(motor)
    budget.update_form_fields(VALID_MOTOR_FORM)

    with caplog.at_level(logging.INFO, logger="quoteflow.controllers.budget"):
        submitted = budget.submit_budget()

    assert submitted
    assert budget.error is None
    assert "Quote submitted: product=ind_001" in caplog.text
    assert "final_price=2970.00" in caplog.text


def test_submit_refused_when_invalid(budget: BudgetController, motor: Product) -> None:
    budget.select_product(motor)

    assert budget.submit_budget() is False
    assert budget.error == "Formulário inválido - não é possível submeter"


def test_budget_summary_totals(budget: BudgetController, motor: Product) -> None:
    budget.select_product(motor)
    budget.update_form_fields(VALID_MOTOR_FORM)

    summary = budget.get_budget_summary()

    assert summary is not None
    assert summary.is_valid
    assert summary.quantity_value == 100
    assert summary.total_price == pytest.approx(297000.0)
    assert summary.total_savings == pytest.approx(99000.0)
    assert summary.discount_percentage == pytest.approx(30.0)


def test_summary_quantity_override_and_zero_base(motor: Product) -> None:
    summary = BudgetSummary(
        product=motor,
        form_data={"quantity": "abc"},
        pricing=PricingResult(base_price=0.0, final_price=0.0),
        is_valid=False,
    )

    assert summary.quantity_value == 1
    assert summary.discount_percentage == 0.0
    assert BudgetSummary(motor, {}, PricingResult(10.0, 10.0), True, quantity=3).total_price == 30.0


def test_select_product_by_id(budget: BudgetController) -> None:
    product = budget.select_product_by_id("corp_002")

    assert budget.form_controller.selected_product == product

    with pytest.raises(CatalogError):
        budget.select_product_by_id("missing")


def test_update_without_product_is_ignored(budget: BudgetController) -> None:
    budget.update_form_field("quantity", "10")

    assert budget.current_pricing is None
    assert budget.get_budget_summary() is None


def test_clear_form(budget: BudgetController, motor: Product) -> None:
    budget.select_product(motor)
    budget.submit_budget()

    budget.clear_form()

    assert budget.current_pricing is None
    assert budget.current_validation is None
    assert budget.error is None
    assert budget.form_controller.selected_product is None


def test_listeners_fire_in_registration_order_and_can_be_removed() -> None:
    notifier = ChangeNotifier()
    order: list[str] = []

    def second() -> None:
        order.append("second")

    notifier.add_listener(lambda: order.append("first"))
    notifier.add_listener(second)
    notifier.notify_listeners()
    notifier.remove_listener(second)
    notifier.remove_listener(second)
    notifier.notify_listeners()

    assert order == ["first", "second", "first"]
