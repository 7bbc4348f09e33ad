"""Validation helpers for rule use cases."""

from typing import Any

from app.domain.rules import decode_rule_value, ensure_rule_kind


def resolve_value_input(
    kind: str | None,
    *,
    value: Any = None,
    value_text: str | None = None,
) -> Any:
    """Return the value an author supplied, decoding ``value_text`` when given.

    Authors either send the structured payload or the single-line text typed
    into the rule form, never both. ``None`` means no value was supplied.
    """

    if value is not None and value_text is not None:
        raise ValueError("Provide either 'value' or 'value_text', not both")
    if value_text is None:
        return value
    if kind is None:
        raise ValueError("'value_text' can only be decoded together with a rule kind")
    return decode_rule_value(ensure_rule_kind(kind), value_text)


__all__ = ["resolve_value_input"]
