"""Tests for concrete validation rules."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from quoteflow.rules import (
    CertificationRequiredRule,
    DeliveryTimeValidationRule,
    MinimumQuantityRule,
    QuantityValidationRule,
    RuleContext,
)

type ContextFactory = Callable[..., RuleContext]


def _certification() -> CertificationRequiredRule:
    return CertificationRequiredRule(
        id="cert",
        name="Certificação",
        priority=100,
        voltage_threshold=220.0,
        applicable_product_types=frozenset({"industrial"}),
    )


def test_certification_required_above_threshold(make_context: ContextFactory) -> None:
    result = _certification().execute(make_context({"voltage": "380"}, productType="industrial"))

    assert not result.success
    assert result.errors == ("Certificação é obrigatória para produtos com voltagem superior a 220V",)


def test_certification_present_passes(make_context: ContextFactory) -> None:
    result = _certification().execute(
        make_context({"voltage": "380", "certification": "ISO 9001"}, productType="industrial")
    )

    assert result.success
    assert result.changes == {"certificationRequired": True}


def test_certification_not_applicable_at_threshold(make_context: ContextFactory) -> None:
    rule = _certification()

    assert not rule.is_applicable(make_context({"voltage": "220"}, productType="industrial"))
    assert not rule.is_applicable(make_context({"voltage": "380"}, productType="corporate"))


def test_minimum_quantity_message(make_context: ContextFactory) -> None:
    rule = MinimumQuantityRule(id="min", name="Min", priority=90, minimum_quantity=1)

    assert rule.execute(make_context({"quantity": 0})).errors == ("Quantidade mínima é 1 unidades",)
    assert rule.execute(make_context({"quantity": "3"})).success


@pytest.mark.parametrize(
    ("quantity", "errors"),
    [
        (5, ()),
        (1, ("Quantidade mínima é 2 unidades",)),
        (11, ("Quantidade máxima é 10 unidades",)),
    ],
    ids=["inside", "below", "above"],
)
def test_quantity_range(make_context: ContextFactory, quantity: int, errors: tuple[str, ...]) -> None:
    rule = QuantityValidationRule(id="range", name="Range", priority=50, minimum_quantity=2, maximum_quantity=10)

    assert rule.execute(make_context({"quantity": quantity})).errors == errors


def test_delivery_window_reports_bounds(make_context: ContextFactory) -> None:
    rule = DeliveryTimeValidationRule(
        id="delivery", name="Delivery", priority=85, min_delivery_days=1, max_delivery_days=365
    )

    assert rule.execute(make_context({"delivery_days": 0})).errors == ("Prazo mínimo de entrega é 1 dias",)
    assert rule.execute(make_context({"delivery_days": 400})).errors == ("Prazo máximo de entrega é 365 dias",)
    assert rule.execute(make_context({"delivery_days": 30})).success
