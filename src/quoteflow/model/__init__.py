"""Core data models for Quoteflow."""

from .fields import FormFieldConfig, NumberFieldConfig, SelectFieldConfig, SelectOption, TextFieldConfig
from .pricing import PriceAdjustment, PricingResult, ValidationResult
from .products import CorporateProduct, IndustrialProduct, Product, ResidentialProduct

__all__ = [
    "CorporateProduct",
    "FormFieldConfig",
    "IndustrialProduct",
    "NumberFieldConfig",
    "PriceAdjustment",
    "PricingResult",
    "Product",
    "ResidentialProduct",
    "SelectFieldConfig",
    "SelectOption",
    "TextFieldConfig",
    "ValidationResult",
]
