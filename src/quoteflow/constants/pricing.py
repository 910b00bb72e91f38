"""Pricing change keys and adjustment labels."""

from __future__ import annotations

BASE_PRICE_KEY: str = "basePrice"

VOLUME_DISCOUNT_KIND: str = "volumeDiscount"
URGENCY_FEE_KIND: str = "urgencyFee"
VIP_DISCOUNT_KIND: str = "vipDiscount"

AMOUNT_SUFFIX: str = "Amount"
PERCENTAGE_SUFFIX: str = "Percentage"

# Recognized adjustment shapes, scanned in this order within one rule result.
ADJUSTMENT_LABELS: tuple[tuple[str, str], ...] = (
    (VOLUME_DISCOUNT_KIND, "Volume Discount"),
    (URGENCY_FEE_KIND, "Urgency Fee"),
    (VIP_DISCOUNT_KIND, "VIP Discount"),
)

DEFAULT_URGENCY_DELIVERY_DAYS: int = 30
