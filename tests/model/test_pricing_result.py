"""Tests for price adjustment and pricing result models."""

from __future__ import annotations

import pytest

from quoteflow.model import PriceAdjustment, PricingResult


def test_adjustment_sign_helpers() -> None:
    discount = PriceAdjustment(type="Volume Discount", amount=-10.0, percentage=5.0)
    fee = PriceAdjustment(type="Urgency Fee", amount=20.0, percentage=20.0)

    assert discount.is_discount and not discount.is_fee
    assert fee.is_fee and not fee.is_discount


def test_pricing_totals() -> None:
    result = PricingResult(
        base_price=1000.0,
        final_price=1050.0,
        adjustments=(
            PriceAdjustment(type="Volume Discount", amount=-150.0, percentage=15.0),
            PriceAdjustment(type="Urgency Fee", amount=200.0, percentage=20.0),
        ),
    )

    assert result.total_adjustment == pytest.approx(50.0)
    assert result.savings_amount == pytest.approx(150.0)
    assert result.to_dict()["adjustments"][1] == {"type": "Urgency Fee", "amount": 200.0, "percentage": 20.0}
