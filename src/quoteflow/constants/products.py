"""Product type tags, context metadata keys and well-known form field keys."""

from __future__ import annotations

PRODUCT_TYPE_INDUSTRIAL: str = "industrial"
PRODUCT_TYPE_RESIDENTIAL: str = "residential"
PRODUCT_TYPE_CORPORATE: str = "corporate"

KNOWN_PRODUCT_TYPES: tuple[str, ...] = (
    PRODUCT_TYPE_INDUSTRIAL,
    PRODUCT_TYPE_RESIDENTIAL,
    PRODUCT_TYPE_CORPORATE,
)

META_PRODUCT_TYPE: str = "productType"
META_PRODUCT_ID: str = "productId"
META_CUSTOMER_ID: str = "customerId"

FIELD_QUANTITY: str = "quantity"
FIELD_DELIVERY_DAYS: str = "delivery_days"
FIELD_VOLTAGE: str = "voltage"
FIELD_CERTIFICATION: str = "certification"

PRODUCT_ERROR_KEY_PREFIX: str = "product_"
RULE_ERROR_KEY_PREFIX: str = "rule_"

NO_PRODUCT_SELECTED_ERROR: str = "Nenhum produto selecionado"
