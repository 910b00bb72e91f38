"""Tests for RuleContext and RuleResult."""

from __future__ import annotations

from quoteflow.rules import RuleContext, RuleResult


def test_copy_with_shallow_copies_unchanged_maps() -> None:
    context = RuleContext(form_data={"quantity": 5}, calculated_data={"basePrice": 10.0}, metadata={"a": 1})

    copied = context.copy_with(metadata={"b": 2})
    copied.form_data["quantity"] = 99
    copied.calculated_data["extra"] = True

    assert context.form_data == {"quantity": 5}
    assert context.calculated_data == {"basePrice": 10.0}
    assert copied.metadata == {"b": 2}


def test_context_defaults_to_empty_maps() -> None:
    context = RuleContext(form_data={})

    assert context.calculated_data == {}
    assert context.metadata == {}


def test_ok_result_has_no_errors() -> None:
    result = RuleResult.ok("done", {"x": 1})

    assert result.success is True
    assert result.message == "done"
    assert result.changes == {"x": 1}
    assert result.errors == ()
    assert result.should_stop_execution is False


def test_failure_result_keeps_error_order() -> None:
    result = RuleResult.failure(["first", "second"], should_stop_execution=True)

    assert result.success is False
    assert result.errors == ("first", "second")
    assert result.should_stop_execution is True
