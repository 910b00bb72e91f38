"""Priority-ordered rule execution and its category-specific engines.

A pass walks the rules in descending priority (ties keep insertion order),
skips inapplicable ones, and merges each successful rule's changes into the
live context so lower-priority rules see them. Faults raised by a rule are
recorded as errors and never escape ``execute``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from quoteflow.constants.pricing import (
    ADJUSTMENT_LABELS,
    AMOUNT_SUFFIX,
    BASE_PRICE_KEY,
    PERCENTAGE_SUFFIX,
)
from quoteflow.model.fields import FormFieldConfig
from quoteflow.model.pricing import PriceAdjustment, PricingResult, ValidationResult
from quoteflow.rules.base import Rule
from quoteflow.rules.context import RuleContext, RuleResult
from quoteflow.rules.pricing import PricingRule
from quoteflow.rules.validation import ValidationRule
from quoteflow.rules.visibility import VisibilityRule

logger = logging.getLogger(__name__)


def rule_fault_message(rule: Rule, exc: Exception) -> str:
    """Error string recorded when a rule raises during a pass."""
    return f"Erro ao executar regra {rule.name}: {exc}"


@dataclass(frozen=True)
class EngineExecutionResult:
    """Aggregated outcome of one pass."""

    success: bool
    results: dict[str, RuleResult]
    errors: tuple[str, ...]
    messages: tuple[str, ...]
    changes: dict[str, Any]
    context: RuleContext = field(repr=False)


class RulesEngine[R: Rule]:
    """Holds rules of one category sorted by priority and runs them."""

    def __init__(self, rules: list[R] | None = None) -> None:
        self._rules: list[R] = []
        if rules:
            self.add_rules(rules)

    @property
    def rule_count(self) -> int:
        """Number of rules held by the engine."""
        return len(self._rules)

    @property
    def rules(self) -> tuple[R, ...]:
        """Rules in execution order."""
        return tuple(self._rules)

    def add_rule(self, rule: R) -> None:
        """Add *rule* and restore priority order."""
        self._rules.append(rule)
        self._sort_rules_by_priority()

    def add_rules(self, rules: list[R]) -> None:
        """Add several rules with a single re-sort."""
        self._rules.extend(rules)
        self._sort_rules_by_priority()

    def remove_rule(self, rule_id: str) -> bool:
        """Remove every rule with *rule_id*; return whether any was removed."""
        initial_count = len(self._rules)
        self._rules = [rule for rule in self._rules if rule.id != rule_id]
        return len(self._rules) < initial_count

    def clear(self) -> None:
        """Remove all rules."""
        self._rules.clear()

    def get_rules_by_type(self, rule_type: str) -> list[R]:
        """Return the rules whose ``rule_type`` equals *rule_type*."""
        return [rule for rule in self._rules if rule.rule_type == rule_type]

    def _sort_rules_by_priority(self) -> None:
        # list.sort is stable, so equal priorities keep insertion order.
        self._rules.sort(key=lambda rule: rule.priority, reverse=True)

    def execute(self, context: RuleContext) -> EngineExecutionResult:
        """Run every applicable rule against *context* in priority order."""
        results: dict[str, RuleResult] = {}
        errors: list[str] = []
        messages: list[str] = []
        all_changes: dict[str, Any] = {}

        for rule in self._rules:
            try:
                if not rule.is_applicable(context):
                    continue
                result = rule.execute(context)
            except Exception as exc:
                logger.warning("Rule %s raised during execution: %s", rule.id, exc)
                errors.append(rule_fault_message(rule, exc))
                continue

            results[rule.id] = result
            if result.success:
                if result.message is not None:
                    messages.append(result.message)
                all_changes.update(result.changes)
                context.calculated_data.update(result.changes)
            else:
                errors.extend(result.errors)

            if result.should_stop_execution:
                logger.debug("Rule %s stopped the pass", rule.id)
                break

        logger.debug(
            "Pass finished: %d rules, %d applied, %d errors",
            len(self._rules),
            len(results),
            len(errors),
        )
        return EngineExecutionResult(
            success=not errors,
            results=results,
            errors=tuple(errors),
            messages=tuple(messages),
            changes=all_changes,
            context=context,
        )


class PricingEngine(RulesEngine[PricingRule]):
    """Engine that turns pricing rule changes into price adjustments."""

    def calculate_final_price(self, base_price: float, context: RuleContext) -> PricingResult:
        """Price *base_price* by applying every applicable pricing rule.

        Each adjustment is computed against ``base_price`` and summed, so
        percentages never compound.
        """
        context.calculated_data[BASE_PRICE_KEY] = base_price
        outcome = self.execute(context)

        final_price = base_price
        adjustments: list[PriceAdjustment] = []
        for rule_result in outcome.results.values():
            if not rule_result.success:
                continue
            for kind, label in ADJUSTMENT_LABELS:
                amount = rule_result.changes.get(f"{kind}{AMOUNT_SUFFIX}")
                if amount is None:
                    continue
                final_price += amount
                adjustments.append(
                    PriceAdjustment(
                        type=label,
                        amount=amount,
                        percentage=rule_result.changes.get(f"{kind}{PERCENTAGE_SUFFIX}"),
                    )
                )

        return PricingResult(
            base_price=base_price,
            final_price=final_price,
            adjustments=tuple(adjustments),
            errors=outcome.errors,
            messages=outcome.messages,
        )


class ValidationEngine(RulesEngine[ValidationRule]):
    """Engine that reports rule-level form validity."""

    def validate_all(self, context: RuleContext) -> ValidationResult:
        """Run the validation rules and repackage their outcome."""
        outcome = self.execute(context)
        return ValidationResult(
            is_valid=outcome.success,
            errors=outcome.errors,
            messages=outcome.messages,
        )


class VisibilityEngine(RulesEngine[VisibilityRule]):
    """Engine that reshapes form fields."""

    def apply_visibility_rules(
        self,
        fields: list[FormFieldConfig],
        context: RuleContext,
    ) -> list[FormFieldConfig]:
        """Return *fields* with every applicable rule's overrides applied.

        Overrides are merged in rule order, so when two rules touch the same
        field the later (lower-priority) one wins. The result keeps the
        order of *fields*.
        """
        modified: dict[str, FormFieldConfig] = {}
        for rule in self._rules:
            try:
                if not rule.is_applicable(context):
                    continue
                modified.update(rule.apply_visibility_changes(fields, context))
            except Exception as exc:
                logger.warning("Visibility rule %s raised: %s", rule.id, exc)

        return [modified.get(form_field.key, form_field) for form_field in fields]
