"""Registry of rule kinds usable from declarative rule files.

Maps each ``kind`` to a factory that builds the concrete rule from a
validated definition. Only registered kinds can be loaded.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from quoteflow.rules.base import Rule
from quoteflow.rules.pricing import UrgencyFeeRule, VipDiscountRule, VolumeDiscountRule
from quoteflow.rules.validation import (
    CertificationRequiredRule,
    DeliveryTimeValidationRule,
    MinimumQuantityRule,
    QuantityValidationRule,
)
from quoteflow.rules.visibility import ConditionalVisibilityRule, ProductTypeVisibilityRule

type RuleFactory = Callable[[dict[str, Any], dict[str, Any], tuple[str, ...]], Rule]


def _common(definition: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": definition["id"],
        "name": definition["name"],
        "description": definition.get("description", ""),
        "priority": definition["priority"],
        "is_enabled": definition.get("enabled", True),
        "applicable_product_types": frozenset(definition.get("product_types", ())),
        "conditions": dict(definition.get("conditions", {})),
    }


def _volume_discount(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return VolumeDiscountRule(
        **_common(definition),
        minimum_quantity=params["minimum_quantity"],
        discount_percentage=float(params["discount_percentage"]),
    )


def _urgency_fee(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return UrgencyFeeRule(
        **_common(definition),
        max_delivery_days=params["max_delivery_days"],
        fee_percentage=float(params["fee_percentage"]),
    )


def _vip_discount(definition: dict[str, Any], params: dict[str, Any], vip_customers: tuple[str, ...]) -> Rule:
    return VipDiscountRule(
        **_common(definition),
        discount_percentage=float(params["discount_percentage"]),
        vip_customers=frozenset(params.get("vip_customers", vip_customers)),
    )


def _certification_required(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return CertificationRequiredRule(**_common(definition), voltage_threshold=float(params["voltage_threshold"]))


def _minimum_quantity(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return MinimumQuantityRule(**_common(definition), minimum_quantity=params["minimum_quantity"])


def _quantity_range(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return QuantityValidationRule(
        **_common(definition),
        minimum_quantity=params["minimum_quantity"],
        maximum_quantity=params.get("maximum_quantity"),
    )


def _delivery_window(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return DeliveryTimeValidationRule(
        **_common(definition),
        min_delivery_days=params["min_delivery_days"],
        max_delivery_days=params["max_delivery_days"],
    )


def _conditional_visibility(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return ConditionalVisibilityRule(
        **_common(definition),
        trigger_field=params["trigger_field"],
        trigger_value=params["trigger_value"],
        field_visibility_changes=dict(params.get("field_visibility_changes", {})),
        field_required_changes=dict(params.get("field_required_changes", {})),
    )


def _product_type_visibility(definition: dict[str, Any], params: dict[str, Any], _vip: tuple[str, ...]) -> Rule:
    return ProductTypeVisibilityRule(
        **_common(definition),
        product_type_fields={
            product_type: tuple(keys) for product_type, keys in params["product_type_fields"].items()
        },
    )


RULE_REGISTRY: dict[str, RuleFactory] = {
    "volume_discount": _volume_discount,
    "urgency_fee": _urgency_fee,
    "vip_discount": _vip_discount,
    "certification_required": _certification_required,
    "minimum_quantity": _minimum_quantity,
    "quantity_range": _quantity_range,
    "delivery_window": _delivery_window,
    "conditional_visibility": _conditional_visibility,
    "product_type_visibility": _product_type_visibility,
}


def build_rule(definition: dict[str, Any], vip_customers: tuple[str, ...] = ()) -> Rule:
    """Build the concrete rule described by a validated *definition*.

    ``vip_customers`` is used by ``vip_discount`` rules whose params do not
    list their own customers.
    """
    factory = RULE_REGISTRY[definition["kind"]]
    return factory(definition, definition.get("params", {}), vip_customers)
