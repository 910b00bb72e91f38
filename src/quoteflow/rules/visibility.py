"""Visibility rules: show, hide, require or relax form fields."""

from __future__ import annotations

import math
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from quoteflow.constants.products import FIELD_QUANTITY, META_PRODUCT_TYPE
from quoteflow.constants.rule_schema import RULE_TYPE_VISIBILITY
from quoteflow.model.fields import FormFieldConfig
from quoteflow.rules.base import Rule
from quoteflow.rules.context import RuleContext, RuleResult
from quoteflow.utils import parse_float

_THRESHOLD_OPERATORS: tuple[str, ...] = (">", "<")


class VisibilityRule(Rule):
    """Rule that returns replacement field configurations keyed by field key."""

    rule_type: ClassVar[str] = RULE_TYPE_VISIBILITY

    @abstractmethod
    def apply_visibility_changes(
        self,
        fields: list[FormFieldConfig],
        context: RuleContext,
    ) -> dict[str, FormFieldConfig]:
        """Return overrides for the fields this rule changes."""


def _matches_trigger(value: Any, trigger: Any) -> bool:
    """Compare a form value against a trigger, honoring ``>N`` / ``<N`` thresholds."""
    if isinstance(trigger, str) and trigger[:1] in _THRESHOLD_OPERATORS:
        threshold = parse_float(trigger[1:], math.nan)
        number = parse_float(value, math.nan)
        if not math.isnan(threshold) and not math.isnan(number):
            return number > threshold if trigger[0] == ">" else number < threshold
    return value == trigger


@dataclass(frozen=True, kw_only=True)
class ConditionalVisibilityRule(VisibilityRule):
    """Change field visibility or required flags when a trigger field matches."""

    trigger_field: str
    trigger_value: Any
    field_visibility_changes: dict[str, bool] = field(default_factory=dict)
    field_required_changes: dict[str, bool] = field(default_factory=dict)

    def is_applicable(self, context: RuleContext) -> bool:
        if not self.is_enabled or not self.matches_product_type(context):
            return False
        return _matches_trigger(context.form_data.get(self.trigger_field), self.trigger_value)

    def execute(self, context: RuleContext) -> RuleResult:
        if not self.is_applicable(context):
            return RuleResult.ok()

        field_changes: dict[str, bool] = {**self.field_visibility_changes, **self.field_required_changes}
        return RuleResult.ok(
            message="Regras de visibilidade aplicadas",
            changes={"fieldChanges": field_changes},
        )

    def apply_visibility_changes(
        self,
        fields: list[FormFieldConfig],
        context: RuleContext,
    ) -> dict[str, FormFieldConfig]:
        if not self.is_applicable(context):
            return {}

        modified: dict[str, FormFieldConfig] = {}
        for form_field in fields:
            overrides: dict[str, bool] = {}
            if form_field.key in self.field_visibility_changes:
                overrides["is_visible"] = self.field_visibility_changes[form_field.key]
            if form_field.key in self.field_required_changes:
                overrides["is_required"] = self.field_required_changes[form_field.key]
            if overrides:
                modified[form_field.key] = form_field.copy_with(**overrides)
        return modified


@dataclass(frozen=True, kw_only=True)
class ProductTypeVisibilityRule(VisibilityRule):
    """Show only the allow-listed fields of the current product type.

    ``quantity`` stays visible for every product type.
    """

    product_type_fields: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def _visible_fields(self, context: RuleContext) -> tuple[str, ...]:
        product_type = context.metadata.get(META_PRODUCT_TYPE)
        return tuple(self.product_type_fields.get(str(product_type), ()))

    def is_applicable(self, context: RuleContext) -> bool:
        if not self.is_enabled:
            return False
        product_type = context.metadata.get(META_PRODUCT_TYPE)
        return product_type is not None and str(product_type) in self.product_type_fields

    def execute(self, context: RuleContext) -> RuleResult:
        if not self.is_applicable(context):
            return RuleResult.ok()

        product_type = context.metadata.get(META_PRODUCT_TYPE)
        return RuleResult.ok(
            message=f"Campos específicos do produto {product_type} configurados",
            changes={"visibleFields": list(self._visible_fields(context))},
        )

    def apply_visibility_changes(
        self,
        fields: list[FormFieldConfig],
        context: RuleContext,
    ) -> dict[str, FormFieldConfig]:
        if not self.is_applicable(context):
            return {}

        visible = set(self._visible_fields(context))
        modified: dict[str, FormFieldConfig] = {}
        for form_field in fields:
            should_be_visible = form_field.key in visible or form_field.key == FIELD_QUANTITY
            if form_field.is_visible != should_be_visible:
                modified[form_field.key] = form_field.copy_with(is_visible=should_be_visible)
        return modified
