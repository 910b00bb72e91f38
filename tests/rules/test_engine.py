"""Tests for priority-ordered rule execution and the pricing/validation engines."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from quoteflow.rules import (
    PricingEngine,
    RuleContext,
    RuleResult,
    RulesEngine,
    UrgencyFeeRule,
    ValidationEngine,
    ValidationRule,
    VipDiscountRule,
    VolumeDiscountRule,
)

type ContextFactory = Callable[..., RuleContext]


@dataclass(frozen=True, kw_only=True)
class ScriptedRule(ValidationRule):
    """Validation rule whose outcome is fixed up front."""

    outcome: RuleResult = field(default_factory=RuleResult.ok)
    fault: Exception | None = None
    seen: list[dict[str, Any]] = field(default_factory=list)

    def validate_fields(self, context: RuleContext) -> list[str]:
        return []

    def execute(self, context: RuleContext) -> RuleResult:
        self.seen.append(dict(context.calculated_data))
        if self.fault is not None:
            raise self.fault
        return self.outcome


def _scripted(rule_id: str, priority: int, **kwargs: Any) -> ScriptedRule:
    return ScriptedRule(id=rule_id, name=rule_id.title(), priority=priority, **kwargs)


def test_results_follow_descending_priority() -> None:
    engine = RulesEngine([_scripted("low", 1), _scripted("high", 100), _scripted("mid", 50)])

    outcome = engine.execute(RuleContext(form_data={}))

    assert [rule.id for rule in engine.rules] == ["high", "mid", "low"]
    assert list(outcome.results) == ["high", "mid", "low"]


def test_equal_priorities_keep_insertion_order() -> None:
    engine = RulesEngine[ScriptedRule]()
    for rule_id in ("first", "second", "third"):
        engine.add_rule(_scripted(rule_id, 10))

    assert list(engine.execute(RuleContext(form_data={})).results) == ["first", "second", "third"]


def test_success_iff_no_errors() -> None:
    passing = RulesEngine([_scripted("ok", 1)]).execute(RuleContext(form_data={}))
    failing = RulesEngine([_scripted("bad", 1, outcome=RuleResult.failure(["nope"]))]).execute(
        RuleContext(form_data={})
    )

    assert passing.success and passing.errors == ()
    assert not failing.success and failing.errors == ("nope",)


def test_changes_flow_to_lower_priority_rules() -> None:
    first = _scripted("first", 10, outcome=RuleResult.ok("one", {"step": 1}))
    second = _scripted("second", 5, outcome=RuleResult.ok("two", {"other": 2}))
    context = RuleContext(form_data={})

    outcome = RulesEngine([second, first]).execute(context)

    assert second.seen == [{"step": 1}]
    assert outcome.changes == {"step": 1, "other": 2}
    assert outcome.messages == ("one", "two")
    assert context.calculated_data == {"step": 1, "other": 2}


def test_fault_becomes_single_error_and_pass_continues(caplog: pytest.LogCaptureFixture) -> None:
    boom = _scripted("boom", 10, fault=RuntimeError("kaput"))
    after = _scripted("after", 1)

    with caplog.at_level(logging.WARNING, logger="quoteflow.rules.engine"):
        outcome = RulesEngine([boom, after]).execute(RuleContext(form_data={}))

    assert outcome.errors == ("Erro ao executar regra Boom: kaput",)
    assert list(outcome.results) == ["after"]
    assert not outcome.success
    assert "boom" in caplog.text


@pytest.mark.parametrize(
    "stopping_outcome",
    [
        RuleResult.failure(["stop"], should_stop_execution=True),
        RuleResult(success=True, should_stop_execution=True),
    ],
    ids=["failure", "success"],
)
def test_stop_signal_ends_the_pass(stopping_outcome: RuleResult) -> None:
    stopper = _scripted("stopper", 10, outcome=stopping_outcome)
    skipped = _scripted("skipped", 1)
    engine = RulesEngine([stopper, skipped])

    outcome = engine.execute(RuleContext(form_data={}))

    assert list(outcome.results) == ["stopper"]
    assert skipped.seen == []
    assert list(engine.execute(RuleContext(form_data={})).results) == ["stopper"]


def test_inapplicable_rules_are_skipped() -> None:
    restricted = _scripted("restricted", 10, applicable_product_types=frozenset({"corporate"}))

    outcome = RulesEngine([restricted]).execute(RuleContext(form_data={}, metadata={"productType": "industrial"}))

    assert outcome.results == {}
    assert restricted.seen == []


def test_rule_management() -> None:
    engine = RulesEngine([_scripted("a", 1), _scripted("b", 2)])

    assert engine.rule_count == 2
    assert engine.remove_rule("a") is True
    assert engine.remove_rule("a") is False
    assert engine.get_rules_by_type("validation")[0].id == "b"
    assert engine.get_rules_by_type("pricing") == []
    engine.clear()
    assert engine.rule_count == 0


def _pricing_rules() -> list[Any]:
    return [
        VipDiscountRule(
            id="vip",
            name="VIP",
            priority=80,
            discount_percentage=10.0,
            vip_customers=frozenset({"customer_001"}),
        ),
        UrgencyFeeRule(id="urgency", name="Urgency", priority=90, max_delivery_days=7, fee_percentage=20.0),
        VolumeDiscountRule(
            id="volume_100", name="Volume 100", priority=95, minimum_quantity=100, discount_percentage=5.0
        ),
        VolumeDiscountRule(
            id="volume_50", name="Volume 50", priority=100, minimum_quantity=50, discount_percentage=15.0
        ),
    ]


def test_adjustments_are_independent_and_priority_ordered(make_context: ContextFactory) -> None:
    engine = PricingEngine(_pricing_rules())
    context = make_context({"quantity": 100, "delivery_days": 5}, customerId="customer_001")

    result = engine.calculate_final_price(3300.0, context)

    assert [adjustment.amount for adjustment in result.adjustments] == pytest.approx([-495.0, -165.0, 660.0, -330.0])
    assert [adjustment.type for adjustment in result.adjustments] == [
        "Volume Discount",
        "Volume Discount",
        "Urgency Fee",
        "VIP Discount",
    ]
    assert result.final_price == pytest.approx(2970.0)
    assert result.savings_amount == pytest.approx(990.0)
    assert context.calculated_data["basePrice"] == 3300.0


def test_calculate_final_price_is_repeatable(make_context: ContextFactory) -> None:
    engine = PricingEngine(_pricing_rules())
    form = {"quantity": 60, "delivery_days": 3}
    context = make_context(form)

    first = engine.calculate_final_price(1000.0, context)
    second = engine.calculate_final_price(1000.0, context)

    assert first == second


def test_removing_only_rule_leaves_base_price(make_context: ContextFactory) -> None:
    engine = PricingEngine(
        [VolumeDiscountRule(id="volume", name="Volume", priority=1, minimum_quantity=1, discount_percentage=50.0)]
    )

    assert engine.remove_rule("volume")
    result = engine.calculate_final_price(1000.0, make_context({"quantity": 10}))

    assert engine.rule_count == 0
    assert result.final_price == 1000.0
    assert result.adjustments == ()


def test_validate_all_without_applicable_rules_is_valid() -> None:
    result = ValidationEngine().validate_all(RuleContext(form_data={}))

    assert result.is_valid
    assert result.errors == ()


def test_validate_all_collects_rule_errors() -> None:
    engine = ValidationEngine([_scripted("bad", 1, outcome=RuleResult.failure(["a", "b"]))])

    result = engine.validate_all(RuleContext(form_data={}))

    assert not result.is_valid
    assert result.errors == ("a", "b")
