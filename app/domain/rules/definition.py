"""Validation of rule definitions before they are stored."""

from __future__ import annotations

from typing import Any

from app.domain.entities import TARGET_FIELDS, Rule

from .errors import MalformedRuleValue
from .values import RuleValue, default_rule_value, ensure_rule_kind, parse_rule_value


def ensure_rule_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Rule name must not be empty")
    return name.strip()


def ensure_target_field(target_field: Any) -> str:
    if isinstance(target_field, str) and target_field.strip() in TARGET_FIELDS:
        return target_field.strip()
    allowed = ", ".join(TARGET_FIELDS)
    raise ValueError(f"Unsupported target field {target_field!r}; expected one of: {allowed}")


def prepare_rule_definition(
    *,
    name: Any,
    target_field: Any,
    kind: Any,
    value: Any,
) -> tuple[str, str, str, RuleValue]:
    """Validate a new rule and return its canonical ``(name, field, kind, value)``.

    A missing ``value`` falls back to the kind's default; kinds without a
    default reject it.
    """

    canonical_kind = ensure_rule_kind(kind)
    if value is None:
        parsed = default_rule_value(canonical_kind)
        if parsed is None:
            raise MalformedRuleValue(f"A {canonical_kind} rule requires a value")
    else:
        parsed = parse_rule_value(canonical_kind, value)
    return (
        ensure_rule_name(name),
        ensure_target_field(target_field),
        canonical_kind,
        parsed,
    )


def resolve_updated_value(
    current: Rule,
    *,
    kind: Any = None,
    value: Any = None,
) -> tuple[str, RuleValue]:
    """Return the ``(kind, value)`` pair a rule ends up with after an edit.

    Kind and value are validated together. Switching kinds without a new value
    resets the value to the new kind's default and fails when the kind has
    none.
    """

    new_kind = ensure_rule_kind(kind if kind is not None else current.kind)
    if value is not None:
        return new_kind, parse_rule_value(new_kind, value)
    if new_kind != current.kind:
        default = default_rule_value(new_kind)
        if default is None:
            raise MalformedRuleValue(
                f"Changing a rule to {new_kind} requires a value for the new kind"
            )
        return new_kind, default
    return new_kind, parse_rule_value(new_kind, current.value)


__all__ = [
    "ensure_rule_name",
    "ensure_target_field",
    "prepare_rule_definition",
    "resolve_updated_value",
]
