"""Rules engine: rule types, priority-ordered engines and declarative loading."""

from .base import Rule
from .context import RuleContext, RuleResult
from .engine import (
    EngineExecutionResult,
    PricingEngine,
    RulesEngine,
    ValidationEngine,
    VisibilityEngine,
)
from .pricing import PricingRule, UrgencyFeeRule, VipDiscountRule, VolumeDiscountRule
from .service import RulesService
from .validation import (
    CertificationRequiredRule,
    DeliveryTimeValidationRule,
    MinimumQuantityRule,
    QuantityValidationRule,
    ValidationRule,
)
from .visibility import ConditionalVisibilityRule, ProductTypeVisibilityRule, VisibilityRule

__all__ = [
    "CertificationRequiredRule",
    "ConditionalVisibilityRule",
    "DeliveryTimeValidationRule",
    "EngineExecutionResult",
    "MinimumQuantityRule",
    "PricingEngine",
    "PricingRule",
    "ProductTypeVisibilityRule",
    "QuantityValidationRule",
    "Rule",
    "RuleContext",
    "RuleResult",
    "RulesEngine",
    "RulesService",
    "UrgencyFeeRule",
    "ValidationEngine",
    "ValidationRule",
    "VipDiscountRule",
    "VisibilityEngine",
    "VisibilityRule",
    "VolumeDiscountRule",
]
