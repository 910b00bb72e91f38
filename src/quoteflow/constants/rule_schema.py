"""Schema constants for declarative rule files."""

from __future__ import annotations

RULE_TYPE_PRICING: str = "pricing"
RULE_TYPE_VALIDATION: str = "validation"
RULE_TYPE_VISIBILITY: str = "visibility"

VALID_RULE_TYPES: frozenset[str] = frozenset({RULE_TYPE_PRICING, RULE_TYPE_VALIDATION, RULE_TYPE_VISIBILITY})

REQUIRED_TOP_KEYS: frozenset[str] = frozenset({"id", "kind", "name", "priority", "params"})
ALLOWED_TOP_KEYS: frozenset[str] = REQUIRED_TOP_KEYS | {
    "description",
    "enabled",
    "product_types",
    "conditions",
}

# kind -> (required params, optional params)
KIND_PARAMS: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "volume_discount": (frozenset({"minimum_quantity", "discount_percentage"}), frozenset()),
    "urgency_fee": (frozenset({"max_delivery_days", "fee_percentage"}), frozenset()),
    "vip_discount": (frozenset({"discount_percentage"}), frozenset({"vip_customers"})),
    "certification_required": (frozenset({"voltage_threshold"}), frozenset()),
    "minimum_quantity": (frozenset({"minimum_quantity"}), frozenset()),
    "quantity_range": (frozenset({"minimum_quantity"}), frozenset({"maximum_quantity"})),
    "delivery_window": (frozenset({"min_delivery_days", "max_delivery_days"}), frozenset()),
    "conditional_visibility": (
        frozenset({"trigger_field", "trigger_value"}),
        frozenset({"field_visibility_changes", "field_required_changes"}),
    ),
    "product_type_visibility": (frozenset({"product_type_fields"}), frozenset()),
}

VALID_KINDS: frozenset[str] = frozenset(KIND_PARAMS)

RULE_FILE_SUFFIX: str = ".yaml"

# param name -> expected value shape
PARAM_SHAPES: dict[str, str] = {
    "minimum_quantity": "int",
    "maximum_quantity": "int",
    "max_delivery_days": "int",
    "min_delivery_days": "int",
    "discount_percentage": "number",
    "fee_percentage": "number",
    "voltage_threshold": "number",
    "vip_customers": "string_list",
    "trigger_field": "string",
    "trigger_value": "scalar",
    "field_visibility_changes": "bool_map",
    "field_required_changes": "bool_map",
    "product_type_fields": "string_list_map",
}
