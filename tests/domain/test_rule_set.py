"""Tests for the in-memory rule set."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from app.domain.entities import Product
from app.domain.rules import MalformedRuleValue, NotFound, RuleSet


def test_add_assigns_ids_and_canonical_values() -> None:
    rules = RuleSet()

    presence = rules.add("MRP Presence Check", "mrp", "presence")
    price_cap = rules.add("MRP Cap", "mrp", "range", {"min": 0, "max": 1000}, is_active=False)

    assert presence.id and price_cap.id and presence.id != price_cap.id
    assert presence.value == {"required": True}
    assert len(rules) == 2
    assert rules.get(price_cap.id) == price_cap
    assert [rule.id for rule in rules.active()] == [presence.id]
    assert rules.by_target_field("manufacturer") == []


def test_add_rejects_invalid_definitions() -> None:
    rules = RuleSet()

    with pytest.raises(MalformedRuleValue):
        rules.add("Cap", "mrp", "range")
    with pytest.raises(ValueError):
        rules.add("", "mrp", "presence")
    with pytest.raises(ValueError):
        rules.add("Weight", "weight", "presence")
    assert len(rules) == 0


def test_set_active_toggles_evaluation() -> None:
    rules = RuleSet()
    rule = rules.add("MRP Presence Check", "mrp", "presence")
    product = Product(id="p-1", name="Green Tea Bags")

    assert len(rules.evaluate(product).violations) == 1

    rules.set_active(rule.id, False)
    assert rules.evaluate(product).violations == []

    rules.set_active(rule.id, True)
    assert len(rules.evaluate(product).violations) == 1


def test_update_validates_kind_and_value_together() -> None:
    rules = RuleSet()
    rule = rules.add("MRP Cap", "mrp", "range", {"min": 0, "max": 1000})

    widened = rules.update(rule.id, value={"min": 0, "max": 5000})
    assert widened.value == {"min": 0, "max": 5000}
    assert widened.updated_at is not None

    with pytest.raises(MalformedRuleValue):
        rules.update(rule.id, kind="list")
    assert rules.get(rule.id).kind == "range"

    switched = rules.update(rule.id, kind="presence")
    assert switched.kind == "presence"
    assert switched.value == {"required": True}

    renamed = rules.update(rule.id, name="MRP Declared", kind="list", value=["99"])
    assert renamed.name == "MRP Declared"
    assert renamed.value == ["99"]


def test_remove_unknown_rule_raises_not_found() -> None:
    rules = RuleSet()
    rule = rules.add("MRP Presence Check", "mrp", "presence")

    rules.remove(rule.id)
    assert len(rules) == 0
    with pytest.raises(NotFound):
        rules.remove(rule.id)
    with pytest.raises(NotFound):
        rules.get(rule.id)


def test_snapshots_are_not_affected_by_later_writes() -> None:
    rules = RuleSet()
    rules.add("MRP Presence Check", "mrp", "presence")
    snapshot = rules.snapshot()

    rules.add("MRP Cap", "mrp", "range", {"min": 0, "max": 1000})

    assert len(snapshot) == 1
    assert len(rules.snapshot()) == 2


def test_loaded_corrupt_rules_are_reported_as_skipped() -> None:
    rules = RuleSet()
    valid = rules.add("MRP Cap", "mrp", "range", {"min": 0, "max": 1000})
    corrupt = replace(valid, id="legacy", value="0-1000")
    loaded = RuleSet([valid, corrupt])

    result = loaded.evaluate({"mrp": Decimal("1500")})

    assert len(result.violations) == 1
    assert result.skipped == ["legacy"]
