"""Tests for evaluating rules against product records."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from app.domain.entities import Product, Rule, Violation
from app.domain.rules import (
    CorruptRule,
    CustomEvaluatorRegistry,
    evaluate,
    evaluate_all,
)


def _rule(kind: str, value, *, target_field: str = "mrp", **overrides) -> Rule:
    fields = {
        "id": f"{kind}-{target_field}",
        "name": f"{kind} check on {target_field}",
        "target_field": target_field,
        "kind": kind,
        "value": value,
        "description": None,
        "is_active": True,
        "created_by": None,
        "created_at": None,
        "updated_at": None,
    }
    fields.update(overrides)
    return Rule(**fields)


def _product(**fields) -> Product:
    return Product(id="p-1", name="Instant Coffee Powder", **fields)


def test_presence_flags_missing_mrp_with_high_severity() -> None:
    violation = evaluate(_rule("presence", {"required": True}), _product())

    assert violation == Violation(
        field="mrp",
        rule_name="presence check on mrp",
        message="MRP is required but missing",
        severity="high",
    )


def test_presence_requires_a_number_for_mrp() -> None:
    rule = _rule("presence", {"required": True})

    assert evaluate(rule, {"mrp": "not priced"}).severity == "high"
    assert evaluate(rule, {"mrp": Decimal("149.50")}) is None
    assert evaluate(rule, {"mrp": "149.50"}) is None


def test_presence_treats_blank_text_as_missing() -> None:
    rule = _rule("presence", {"required": True}, target_field="manufacturer")

    assert evaluate(rule, _product(manufacturer="   ")) is not None
    assert evaluate(rule, _product(manufacturer="XYZ Beverages")) is None


def test_range_flags_values_outside_bounds() -> None:
    rule = _rule("range", {"min": 0, "max": 1000})

    violation = evaluate(rule, _product(mrp=Decimal("1500")))
    assert violation is not None
    assert violation.severity == "medium"
    assert "1500" in violation.message

    assert evaluate(rule, _product(mrp=Decimal("1000"))) is None
    assert evaluate(rule, _product(mrp=Decimal("0"))) is None


def test_range_ignores_absent_or_non_numeric_values() -> None:
    rule = _rule("range", {"min": 0, "max": 1000})

    assert evaluate(rule, _product()) is None
    assert evaluate(rule, {"mrp": "free"}) is None


def test_regex_matches_whole_value_unless_anchored() -> None:
    unanchored = _rule("regex", {"pattern": r"\d+ g"}, target_field="net_quantity")
    assert evaluate(unanchored, _product(net_quantity="100 g")) is None
    assert evaluate(unanchored, _product(net_quantity="pack of 100 g")) is not None

    anchored = _rule("regex", {"pattern": r"^\d+"}, target_field="net_quantity")
    assert evaluate(anchored, _product(net_quantity="100 g")) is None


def test_regex_honours_flags_and_skips_absent_values() -> None:
    rule = _rule(
        "regex",
        {"pattern": r"^\d+(\.\d+)?\s*(kg|g|l|ml|pcs|units?)$", "flags": "i"},
        target_field="net_quantity",
    )

    assert evaluate(rule, _product(net_quantity="1 KG")) is None
    assert evaluate(rule, _product(net_quantity="25 bags")) is not None
    assert evaluate(rule, _product()) is None


def test_regex_reads_dates_in_iso_format() -> None:
    rule = _rule("regex", {"pattern": r"2024-\d{2}-\d{2}"}, target_field="date_of_manufacture")

    assert evaluate(rule, _product(date_of_manufacture=date(2024, 3, 1))) is None


def test_list_requires_one_of_the_entries() -> None:
    rule = _rule("list", ["India", "Nepal"], target_field="country_of_origin")

    assert evaluate(rule, _product(country_of_origin="India")) is None
    assert evaluate(rule, _product(country_of_origin="india")) is not None
    assert evaluate(rule, _product()) is not None


def test_inactive_rules_never_report() -> None:
    rule = _rule("presence", {"required": True}, is_active=False)

    assert evaluate(rule, _product()) is None


def test_corrupt_rules_raise() -> None:
    with pytest.raises(CorruptRule) as excinfo:
        evaluate(_rule("range", ["India"]), _product(mrp=Decimal("10")))
    assert excinfo.value.rule_id == "range-mrp"

    with pytest.raises(CorruptRule):
        evaluate(_rule("checksum", "x"), _product())
    with pytest.raises(CorruptRule):
        evaluate(_rule("presence", {"required": True}, target_field="weight"), _product())


def test_evaluate_all_collects_violations_and_skips_corrupt_rules() -> None:
    rules = [
        _rule("presence", {"required": True}),
        _rule("range", "0-1000", id="broken"),
        _rule("presence", {"required": True}, target_field="manufacturer"),
        _rule("presence", {"required": True}, target_field="country_of_origin", is_active=False),
    ]

    result = evaluate_all(rules, _product())

    assert [violation.field for violation in result.violations] == ["mrp", "manufacturer"]
    assert result.skipped == ["broken"]
    assert result.compliant is False


def test_custom_rules_use_the_registered_evaluator() -> None:
    registry = CustomEvaluatorRegistry()
    rule = _rule("custom", "fssai", target_field="consumer_care_details")

    assert evaluate(rule, _product(), evaluators=registry) is None

    registry.register(rule.name, lambda rule, product: "FSSAI licence number missing")
    violation = evaluate(rule, _product(), evaluators=registry)
    assert violation.message == "FSSAI licence number missing"
    assert violation.severity == "medium"

    custom = Violation(field="consumer_care_details", rule_name="x", message="y", severity="low")
    registry.register(rule.id, lambda rule, product: custom)
    assert evaluate(rule, _product(), evaluators=registry) is custom


def test_custom_evaluator_with_unexpected_result_is_corrupt() -> None:
    registry = CustomEvaluatorRegistry()
    registry.register("custom-mrp", lambda rule, product: 42)

    with pytest.raises(CorruptRule) as excinfo:
        evaluate(_rule("custom", "anything"), _product(), evaluators=registry)
    assert excinfo.value.rule_id == "custom-mrp"


def test_failing_custom_evaluator_is_skipped_by_evaluate_all() -> None:
    registry = CustomEvaluatorRegistry()

    def _explode(rule, product):
        raise KeyError("licence")

    registry.register("custom-mrp", _explode)
    rules = [
        _rule("custom", "anything"),
        _rule("presence", {"required": True}, target_field="manufacturer"),
    ]

    result = evaluate_all(rules, _product(), evaluators=registry)

    assert result.skipped == ["custom-mrp"]
    assert [violation.field for violation in result.violations] == ["manufacturer"]


def test_registry_rejects_bad_registrations() -> None:
    registry = CustomEvaluatorRegistry()

    with pytest.raises(ValueError):
        registry.register(" ", lambda rule, product: None)
    with pytest.raises(ValueError):
        registry.register("key", "not callable")

    registry.register("key", lambda rule, product: None)
    assert "key" in registry
    assert len(registry) == 1
    registry.unregister("key")
    assert len(registry) == 0
