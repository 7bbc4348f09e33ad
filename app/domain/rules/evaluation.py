"""Evaluate compliance rules against product records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from app.domain.entities import (
    NUMERIC_TARGET_FIELDS,
    RULE_KIND_CUSTOM,
    RULE_KIND_LIST,
    RULE_KIND_PRESENCE,
    RULE_KIND_RANGE,
    RULE_KIND_REGEX,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
    TARGET_FIELDS,
    EvaluationResult,
    Rule,
    Violation,
)

from .errors import CorruptRule, InvalidPattern, InvalidRuleKind, MalformedRuleValue
from .registry import CustomEvaluatorRegistry, custom_evaluators
from .values import (
    CustomValue,
    ListValue,
    RangeValue,
    RegexValue,
    RuleValue,
    ensure_rule_kind,
    parse_rule_value,
)

logger = logging.getLogger(__name__)


def read_product_field(product: Any, field: str) -> Any:
    """Return ``field`` from a product entity or a plain mapping."""

    if isinstance(product, Mapping):
        return product.get(field)
    return getattr(product, field, None)


def _field_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _field_number(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, (int, float, Decimal)):
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _label(field: str) -> str:
    return TARGET_FIELDS.get(field, field)


def _violation(rule: Rule, message: str, severity: str = SEVERITY_MEDIUM) -> Violation:
    return Violation(
        field=rule.target_field,
        rule_name=rule.name,
        message=message,
        severity=severity,
    )


def _check_presence(*, rule: Rule, field_value: Any, **_: Any) -> Violation | None:
    label = _label(rule.target_field)
    if _is_blank(field_value):
        return _violation(rule, f"{label} is required but missing", SEVERITY_HIGH)
    if rule.target_field in NUMERIC_TARGET_FIELDS and _field_number(field_value) is None:
        return _violation(
            rule, f"{label} must be a number, got {field_value!r}", SEVERITY_HIGH
        )
    return None


def _check_regex(
    *, rule: Rule, value: RuleValue, field_value: Any, **_: Any
) -> Violation | None:
    assert isinstance(value, RegexValue)
    if _is_blank(field_value):
        return None
    text = _field_text(field_value) or ""
    compiled = value.compile()
    matched = compiled.search(text) if value.is_anchored() else compiled.fullmatch(text)
    if matched is None:
        return _violation(
            rule,
            f"{_label(rule.target_field)} {text!r} does not match the required format "
            f"{value.pattern!r}",
        )
    return None


def _check_list(
    *, rule: Rule, value: RuleValue, field_value: Any, **_: Any
) -> Violation | None:
    assert isinstance(value, ListValue)
    allowed = ", ".join(value.entries)
    label = _label(rule.target_field)
    if field_value is None:
        return _violation(rule, f"{label} is missing; expected one of: {allowed}")
    text = _field_text(field_value)
    if text not in value.entries:
        return _violation(rule, f"{label} {text!r} is not one of: {allowed}")
    return None


def _check_range(
    *, rule: Rule, value: RuleValue, field_value: Any, **_: Any
) -> Violation | None:
    assert isinstance(value, RangeValue)
    number = _field_number(field_value)
    if number is None:
        return None
    if number < Decimal(str(value.min)) or number > Decimal(str(value.max)):
        return _violation(
            rule,
            f"{_label(rule.target_field)} {format(number, 'f')} is outside the allowed "
            f"range {value.min}-{value.max}",
        )
    return None


def _check_custom(
    *,
    rule: Rule,
    value: RuleValue,
    product: Any,
    evaluators: CustomEvaluatorRegistry,
    **_: Any,
) -> Violation | None:
    assert isinstance(value, CustomValue)
    evaluator = evaluators.resolve(rule)
    if evaluator is None:
        logger.debug("No custom evaluator registered for rule %s (%s)", rule.id, rule.name)
        return None
    try:
        outcome = evaluator(rule, product)
    except Exception as exc:
        raise CorruptRule(rule.id, f"custom evaluator failed: {exc!r}") from exc
    if outcome is None or isinstance(outcome, Violation):
        return outcome
    if isinstance(outcome, str):
        return _violation(rule, outcome)
    raise CorruptRule(
        rule.id,
        f"custom evaluator returned {type(outcome).__name__}; "
        "expected None, a message or a Violation",
    )


_RULE_CHECKS = {
    RULE_KIND_PRESENCE: _check_presence,
    RULE_KIND_REGEX: _check_regex,
    RULE_KIND_LIST: _check_list,
    RULE_KIND_RANGE: _check_range,
    RULE_KIND_CUSTOM: _check_custom,
}


def evaluate(
    rule: Rule,
    product: Any,
    *,
    evaluators: CustomEvaluatorRegistry | None = None,
) -> Violation | None:
    """Return the violation ``product`` commits against ``rule``, if any.

    Inactive rules never produce a violation. A rule whose kind, target field or
    stored value cannot be trusted raises :class:`CorruptRule`, as does a custom
    evaluator that fails or returns something other than ``None``, a message or
    a :class:`Violation`.
    """

    if not rule.is_active:
        return None

    try:
        kind = ensure_rule_kind(rule.kind)
        value = parse_rule_value(kind, rule.value)
    except (InvalidRuleKind, MalformedRuleValue, InvalidPattern) as exc:
        raise CorruptRule(rule.id, str(exc)) from exc
    if rule.target_field not in TARGET_FIELDS:
        raise CorruptRule(rule.id, f"unknown target field {rule.target_field!r}")

    return _RULE_CHECKS[kind](
        rule=rule,
        value=value,
        product=product,
        field_value=read_product_field(product, rule.target_field),
        evaluators=evaluators if evaluators is not None else custom_evaluators,
    )


def evaluate_all(
    rules: Iterable[Rule],
    product: Any,
    *,
    evaluators: CustomEvaluatorRegistry | None = None,
) -> EvaluationResult:
    """Evaluate every active rule in order, skipping the corrupt ones."""

    result = EvaluationResult()
    for rule in rules:
        if not rule.is_active:
            continue
        try:
            violation = evaluate(rule, product, evaluators=evaluators)
        except CorruptRule as exc:
            logger.warning("Skipping corrupt rule %s (%s): %s", rule.id, rule.name, exc.reason)
            result.skipped.append(exc.rule_id)
            continue
        if violation is not None:
            result.violations.append(violation)
    return result


__all__ = ["evaluate", "evaluate_all", "read_product_field"]
