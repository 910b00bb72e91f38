"""Validation rules: pure predicates that turn form data into error messages."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from quoteflow.constants.products import FIELD_CERTIFICATION, FIELD_DELIVERY_DAYS, FIELD_QUANTITY, FIELD_VOLTAGE
from quoteflow.constants.rule_schema import RULE_TYPE_VALIDATION
from quoteflow.rules.base import Rule
from quoteflow.rules.context import RuleContext, RuleResult
from quoteflow.utils import parse_float, parse_int


class ValidationRule(Rule):
    """Rule that reports form errors without touching the price."""

    rule_type: ClassVar[str] = RULE_TYPE_VALIDATION

    @abstractmethod
    def validate_fields(self, context: RuleContext) -> list[str]:
        """Return the error messages for *context* (empty when valid)."""

    def is_applicable(self, context: RuleContext) -> bool:
        return self.is_enabled and self.matches_product_type(context)

    def _passed_message(self) -> str | None:
        return None

    def _passed_changes(self) -> dict[str, Any]:
        return {}

    def execute(self, context: RuleContext) -> RuleResult:
        if not self.is_applicable(context):
            return RuleResult.ok()

        errors = self.validate_fields(context)
        if errors:
            return RuleResult.failure(errors)
        return RuleResult.ok(message=self._passed_message(), changes=self._passed_changes())


@dataclass(frozen=True, kw_only=True)
class CertificationRequiredRule(ValidationRule):
    """Require a certification when the voltage exceeds ``voltage_threshold``."""

    voltage_threshold: float

    def is_applicable(self, context: RuleContext) -> bool:
        if not super().is_applicable(context):
            return False
        return parse_float(context.form_data.get(FIELD_VOLTAGE), 0.0) > self.voltage_threshold

    def validate_fields(self, context: RuleContext) -> list[str]:
        certification = context.form_data.get(FIELD_CERTIFICATION)
        if certification is None or not str(certification).strip():
            return [
                f"Certificação é obrigatória para produtos com voltagem superior a {self.voltage_threshold:g}V"
            ]
        return []

    def _passed_message(self) -> str | None:
        return "Validação de certificação passou"

    def _passed_changes(self) -> dict[str, Any]:
        return {"certificationRequired": True}


@dataclass(frozen=True, kw_only=True)
class MinimumQuantityRule(ValidationRule):
    """Reject quantities below ``minimum_quantity``."""

    minimum_quantity: int

    def validate_fields(self, context: RuleContext) -> list[str]:
        quantity = parse_int(context.form_data.get(FIELD_QUANTITY), 0)
        if quantity < self.minimum_quantity:
            return [f"Quantidade mínima é {self.minimum_quantity} unidades"]
        return []

    def _passed_message(self) -> str | None:
        return "Validação de quantidade passou"


@dataclass(frozen=True, kw_only=True)
class QuantityValidationRule(ValidationRule):
    """Keep the quantity within ``[minimum_quantity, maximum_quantity]``."""

    minimum_quantity: int
    maximum_quantity: int | None = None

    def validate_fields(self, context: RuleContext) -> list[str]:
        errors: list[str] = []
        quantity = parse_int(context.form_data.get(FIELD_QUANTITY), 0)
        if quantity < self.minimum_quantity:
            errors.append(f"Quantidade mínima é {self.minimum_quantity} unidades")
        if self.maximum_quantity is not None and quantity > self.maximum_quantity:
            errors.append(f"Quantidade máxima é {self.maximum_quantity} unidades")
        return errors

    def _passed_message(self) -> str | None:
        return "Validação de quantidade passou"

    def _passed_changes(self) -> dict[str, Any]:
        return {"quantityValid": True}


@dataclass(frozen=True, kw_only=True)
class DeliveryTimeValidationRule(ValidationRule):
    """Keep ``delivery_days`` inside the allowed delivery window."""

    min_delivery_days: int
    max_delivery_days: int

    def validate_fields(self, context: RuleContext) -> list[str]:
        errors: list[str] = []
        delivery_days = parse_int(context.form_data.get(FIELD_DELIVERY_DAYS), 0)
        if delivery_days < self.min_delivery_days:
            errors.append(f"Prazo mínimo de entrega é {self.min_delivery_days} dias")
        if delivery_days > self.max_delivery_days:
            errors.append(f"Prazo máximo de entrega é {self.max_delivery_days} dias")
        return errors

    def _passed_message(self) -> str | None:
        return "Validação de prazo passou"
