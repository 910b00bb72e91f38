"""Pricing rules: each contributes one signed adjustment against the base price."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from quoteflow.constants.pricing import (
    AMOUNT_SUFFIX,
    BASE_PRICE_KEY,
    DEFAULT_URGENCY_DELIVERY_DAYS,
    PERCENTAGE_SUFFIX,
    URGENCY_FEE_KIND,
    VIP_DISCOUNT_KIND,
    VOLUME_DISCOUNT_KIND,
)
from quoteflow.constants.products import FIELD_DELIVERY_DAYS, FIELD_QUANTITY, META_CUSTOMER_ID
from quoteflow.constants.rule_schema import RULE_TYPE_PRICING
from quoteflow.rules.base import Rule
from quoteflow.rules.context import RuleContext, RuleResult
from quoteflow.utils import parse_float, parse_int


def _base_price(context: RuleContext) -> float:
    return parse_float(context.calculated_data.get(BASE_PRICE_KEY), 0.0)


class PricingRule(Rule):
    """Rule that produces a price adjustment.

    Subclasses name their adjustment ``kind`` and report it as
    ``<kind>Amount`` / ``<kind>Percentage`` in the result changes. Amounts
    are always computed against the original base price, never against a
    running total.
    """

    rule_type: ClassVar[str] = RULE_TYPE_PRICING
    adjustment_kind: ClassVar[str]

    @abstractmethod
    def calculate_price_adjustment(self, context: RuleContext) -> float:
        """Return the signed currency delta for *context*."""

    @abstractmethod
    def _applied_message(self) -> str:
        """Human-readable message reported when the rule applies."""

    @property
    @abstractmethod
    def percentage(self) -> float:
        """Informational percentage attached to the adjustment."""

    def execute(self, context: RuleContext) -> RuleResult:
        if not self.is_applicable(context):
            return RuleResult.ok()

        return RuleResult.ok(
            message=self._applied_message(),
            changes={
                f"{self.adjustment_kind}{PERCENTAGE_SUFFIX}": self.percentage,
                f"{self.adjustment_kind}{AMOUNT_SUFFIX}": self.calculate_price_adjustment(context),
            },
        )


@dataclass(frozen=True, kw_only=True)
class VolumeDiscountRule(PricingRule):
    """Discount for orders at or above a minimum quantity."""

    adjustment_kind: ClassVar[str] = VOLUME_DISCOUNT_KIND

    minimum_quantity: int
    discount_percentage: float

    @property
    def percentage(self) -> float:
        return self.discount_percentage

    def is_applicable(self, context: RuleContext) -> bool:
        if not self.is_enabled or not self.matches_product_type(context):
            return False
        quantity = parse_int(context.form_data.get(FIELD_QUANTITY), 0)
        return quantity >= self.minimum_quantity

    def calculate_price_adjustment(self, context: RuleContext) -> float:
        return -(_base_price(context) * self.discount_percentage / 100)

    def _applied_message(self) -> str:
        return f"Desconto por volume aplicado: {self.discount_percentage:.1f}%"


@dataclass(frozen=True, kw_only=True)
class UrgencyFeeRule(PricingRule):
    """Fee for deliveries requested within ``max_delivery_days``."""

    adjustment_kind: ClassVar[str] = URGENCY_FEE_KIND

    max_delivery_days: int
    fee_percentage: float

    @property
    def percentage(self) -> float:
        return self.fee_percentage

    def is_applicable(self, context: RuleContext) -> bool:
        if not self.is_enabled or not self.matches_product_type(context):
            return False
        delivery_days = parse_int(context.form_data.get(FIELD_DELIVERY_DAYS), DEFAULT_URGENCY_DELIVERY_DAYS)
        return delivery_days <= self.max_delivery_days

    def calculate_price_adjustment(self, context: RuleContext) -> float:
        return _base_price(context) * self.fee_percentage / 100

    def _applied_message(self) -> str:
        return f"Taxa de urgência aplicada: +{self.fee_percentage:.1f}%"


@dataclass(frozen=True, kw_only=True)
class VipDiscountRule(PricingRule):
    """Discount for customers listed in ``vip_customers``.

    Only the customer id gates this rule; product type restrictions are not
    consulted.
    """

    adjustment_kind: ClassVar[str] = VIP_DISCOUNT_KIND

    discount_percentage: float
    vip_customers: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "vip_customers", frozenset(self.vip_customers))

    @property
    def percentage(self) -> float:
        return self.discount_percentage

    def is_applicable(self, context: RuleContext) -> bool:
        if not self.is_enabled:
            return False
        customer_id = context.metadata.get(META_CUSTOMER_ID)
        return customer_id is not None and str(customer_id) in self.vip_customers

    def calculate_price_adjustment(self, context: RuleContext) -> float:
        return -(_base_price(context) * self.discount_percentage / 100)

    def _applied_message(self) -> str:
        return f"Desconto VIP aplicado: {self.discount_percentage:.1f}%"
