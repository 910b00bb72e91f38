"""Engine outcome models: price adjustments, pricing and validation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PriceAdjustment:
    """A signed price delta; negative amounts are discounts, positive are fees."""

    type: str
    amount: float
    percentage: float | None = None

    @property
    def is_discount(self) -> bool:
        return self.amount < 0

    @property
    def is_fee(self) -> bool:
        return self.amount > 0

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "amount": self.amount, "percentage": self.percentage}


@dataclass(frozen=True)
class PricingResult:
    """Final price of a quote with the adjustments that produced it."""

    base_price: float
    final_price: float
    adjustments: tuple[PriceAdjustment, ...] = ()
    errors: tuple[str, ...] = ()
    messages: tuple[str, ...] = ()

    @property
    def total_adjustment(self) -> float:
        """Net difference between final and base price."""
        return self.final_price - self.base_price

    @property
    def savings_amount(self) -> float:
        """Sum of all discount magnitudes."""
        return sum(abs(adjustment.amount) for adjustment in self.adjustments if adjustment.amount < 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_price": self.base_price,
            "final_price": self.final_price,
            "total_adjustment": self.total_adjustment,
            "savings_amount": self.savings_amount,
            "adjustments": [adjustment.to_dict() for adjustment in self.adjustments],
            "errors": list(self.errors),
            "messages": list(self.messages),
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of running the validation rules over a form."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    messages: tuple[str, ...] = ()
