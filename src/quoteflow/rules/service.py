"""Assembly of the three rule engines from declarative rule files."""

from __future__ import annotations

import logging
from pathlib import Path

from quoteflow.constants.config import DEFAULT_VIP_CUSTOMERS
from quoteflow.rules.base import Rule
from quoteflow.rules.engine import PricingEngine, ValidationEngine, VisibilityEngine
from quoteflow.rules.loader import load_rules
from quoteflow.rules.pricing import PricingRule
from quoteflow.rules.validation import ValidationRule
from quoteflow.rules.visibility import VisibilityRule

logger = logging.getLogger(__name__)


class RulesService:
    """Owns one pricing, one validation and one visibility engine.

    Each rule is routed to the engine of its category.
    """

    def __init__(self, rules: list[Rule] | None = None) -> None:
        self.pricing_engine = PricingEngine()
        self.validation_engine = ValidationEngine()
        self.visibility_engine = VisibilityEngine()
        if rules:
            self._install(rules)

    @classmethod
    def from_directory(
        cls,
        rules_dir: Path | None = None,
        vip_customers: tuple[str, ...] = DEFAULT_VIP_CUSTOMERS,
    ) -> RulesService:
        """Build a service from the rule files of *rules_dir* (bundled rules by default)."""
        return cls(load_rules(rules_dir, vip_customers))

    def _install(self, rules: list[Rule]) -> None:
        pricing = [rule for rule in rules if isinstance(rule, PricingRule)]
        validation = [rule for rule in rules if isinstance(rule, ValidationRule)]
        visibility = [rule for rule in rules if isinstance(rule, VisibilityRule)]
        self.pricing_engine.add_rules(pricing)
        self.validation_engine.add_rules(validation)
        self.visibility_engine.add_rules(visibility)
        logger.debug(
            "Rules installed: %d pricing, %d validation, %d visibility",
            len(pricing),
            len(validation),
            len(visibility),
        )

    def add_custom_pricing_rule(self, rule: PricingRule) -> None:
        self.pricing_engine.add_rule(rule)

    def add_custom_validation_rule(self, rule: ValidationRule) -> None:
        self.validation_engine.add_rule(rule)

    def add_custom_visibility_rule(self, rule: VisibilityRule) -> None:
        self.visibility_engine.add_rule(rule)

    def remove_pricing_rule(self, rule_id: str) -> bool:
        return self.pricing_engine.remove_rule(rule_id)

    def remove_validation_rule(self, rule_id: str) -> bool:
        return self.validation_engine.remove_rule(rule_id)

    def remove_visibility_rule(self, rule_id: str) -> bool:
        return self.visibility_engine.remove_rule(rule_id)

    def get_active_pricing_rules(self) -> list[PricingRule]:
        return [rule for rule in self.pricing_engine.rules if rule.is_enabled]

    def get_active_validation_rules(self) -> list[ValidationRule]:
        return [rule for rule in self.validation_engine.rules if rule.is_enabled]

    def get_active_visibility_rules(self) -> list[VisibilityRule]:
        return [rule for rule in self.visibility_engine.rules if rule.is_enabled]
