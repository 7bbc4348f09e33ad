"""Canonical rule values and their single-line text representation.

Each rule kind owns exactly one value shape, modelled as a frozen dataclass.
Stored payloads are plain JSON (``RuleValue.to_json``) so that rules written
by earlier clients remain readable:

=========  ==================================  ============================
kind       text typed by the author            stored JSON
=========  ==================================  ============================
presence   ignored                             ``{"required": true}``
regex      ``^[A-Z]{2}$``                      ``{"pattern": "^[A-Z]{2}$"}``
list       ``India, Nepal``                    ``["India", "Nepal"]``
range      ``0-1000``                          ``{"min": 0, "max": 1000}``
custom     free text                           ``"free text"``
=========  ==================================  ============================
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Final, Union

from app.domain.entities import (
    RULE_KINDS,
    RULE_KIND_CUSTOM,
    RULE_KIND_LIST,
    RULE_KIND_PRESENCE,
    RULE_KIND_RANGE,
    RULE_KIND_REGEX,
)

from .errors import InvalidPattern, InvalidRuleKind, MalformedRuleValue

_REGEX_FLAGS: Final[dict[str, int]] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}
_NUMBER: Final[str] = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_RANGE_TEXT_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^\s*(?P<min>{_NUMBER})\s*-\s*(?P<max>{_NUMBER})\s*$"
)
_INTEGER_TEXT_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class PresenceValue:
    """The target field must be declared."""

    kind: ClassVar[str] = RULE_KIND_PRESENCE

    def to_json(self) -> dict[str, Any]:
        return {"required": True}


@dataclass(frozen=True)
class RegexValue:
    """The target field must match ``pattern``."""

    kind: ClassVar[str] = RULE_KIND_REGEX

    pattern: str
    flags: str = ""

    def compile(self) -> re.Pattern[str]:
        return _compile_pattern(self.pattern, self.flags)

    def is_anchored(self) -> bool:
        """Return ``True`` when the author pinned the pattern to either end."""

        return self.pattern.startswith("^") or (
            self.pattern.endswith("$") and not self.pattern.endswith("\\$")
        )

    def to_json(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"pattern": self.pattern}
        if self.flags:
            payload["flags"] = self.flags
        return payload


@dataclass(frozen=True)
class ListValue:
    """The target field must equal one of ``entries``."""

    kind: ClassVar[str] = RULE_KIND_LIST

    entries: tuple[str, ...]

    def to_json(self) -> list[str]:
        return list(self.entries)


@dataclass(frozen=True)
class RangeValue:
    """The numeric target field must lie within ``[min, max]``."""

    kind: ClassVar[str] = RULE_KIND_RANGE

    min: int | float
    max: int | float

    def to_json(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class CustomValue:
    """Opaque configuration handed to an externally registered evaluator."""

    kind: ClassVar[str] = RULE_KIND_CUSTOM

    expression: str

    def to_json(self) -> str:
        return self.expression


RuleValue = Union[PresenceValue, RegexValue, ListValue, RangeValue, CustomValue]

_VALUE_TYPES: Final[tuple[type, ...]] = (
    PresenceValue,
    RegexValue,
    ListValue,
    RangeValue,
    CustomValue,
)


def ensure_rule_kind(kind: Any) -> str:
    """Return the canonical spelling of ``kind`` or raise :class:`InvalidRuleKind`."""

    if isinstance(kind, str):
        normalized = kind.strip().lower()
        if normalized in RULE_KINDS:
            return normalized
    raise InvalidRuleKind(kind)


def default_rule_value(kind: str) -> RuleValue | None:
    """Return the value a rule of ``kind`` takes when none is supplied."""

    if ensure_rule_kind(kind) == RULE_KIND_PRESENCE:
        return PresenceValue()
    return None


def decode_rule_value(kind: str, text: str | None) -> RuleValue:
    """Turn the single-line text typed by an author into a canonical value."""

    kind = ensure_rule_kind(kind)
    return _DECODERS[kind]("" if text is None else str(text))


def encode_rule_value(kind: str, value: Any) -> str:
    """Render ``value`` as the text an author would type to produce it.

    ``value`` may be a :data:`RuleValue` or a raw stored payload. Payloads that
    do not match ``kind`` are serialized as-is so that an edit form can still
    show what is stored.
    """

    kind = ensure_rule_kind(kind)
    try:
        parsed = parse_rule_value(kind, value)
    except (MalformedRuleValue, InvalidPattern):
        return value if isinstance(value, str) else _serialize(value)
    return _ENCODERS[kind](parsed)


def parse_rule_value(kind: str, raw: Any) -> RuleValue:
    """Validate a stored payload (or an existing value) against ``kind``."""

    kind = ensure_rule_kind(kind)
    if isinstance(raw, _VALUE_TYPES):
        if raw.kind != kind:
            msg = f"A {raw.kind} value cannot be used for a {kind} rule"
            raise MalformedRuleValue(msg)
        return _PARSERS[kind](raw.to_json())
    return _PARSERS[kind](raw)


def _serialize(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


def _compile_pattern(pattern: str, flags: str) -> re.Pattern[str]:
    compiled_flags = 0
    for flag in flags:
        try:
            compiled_flags |= _REGEX_FLAGS[flag]
        except KeyError as exc:
            raise InvalidPattern(f"Unsupported regex flag: {flag!r}") from exc
    try:
        return re.compile(pattern, compiled_flags)
    except re.error as exc:
        raise InvalidPattern(f"Invalid regular expression {pattern!r}: {exc}") from exc


def _build_regex(pattern: Any, flags: Any = None) -> RegexValue:
    if not isinstance(pattern, str) or not pattern:
        raise MalformedRuleValue("A regex rule requires a non-empty pattern")
    if flags is None:
        flags = ""
    if not isinstance(flags, str):
        raise MalformedRuleValue("Regex flags must be a string such as 'i'")
    normalized_flags = "".join(sorted(set(flags.lower())))
    _compile_pattern(pattern, normalized_flags)
    return RegexValue(pattern=pattern, flags=normalized_flags)


def _to_number(text: str) -> int | float:
    if _INTEGER_TEXT_PATTERN.match(text):
        return int(text)
    return float(text)


def _ensure_number(value: Any, label: str) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRuleValue(f"Range {label} must be a number")
    if not math.isfinite(value):
        raise MalformedRuleValue(f"Range {label} must be a finite number")
    return value


def _build_range(minimum: Any, maximum: Any) -> RangeValue:
    minimum = _ensure_number(minimum, "min")
    maximum = _ensure_number(maximum, "max")
    if minimum > maximum:
        raise MalformedRuleValue(
            f"Range min ({minimum}) must not be greater than max ({maximum})"
        )
    return RangeValue(min=minimum, max=maximum)


def _build_list(entries: Sequence[Any]) -> ListValue:
    cleaned: list[str] = []
    for entry in entries:
        if not isinstance(entry, str):
            raise MalformedRuleValue("List entries must be strings")
        if "," in entry:
            raise MalformedRuleValue(
                f"List entries cannot contain a comma: {entry!r}"
            )
        stripped = entry.strip()
        if stripped:
            cleaned.append(stripped)
    if not cleaned:
        raise MalformedRuleValue("A list rule requires at least one allowed value")
    return ListValue(entries=tuple(cleaned))


def _decode_presence(text: str) -> RuleValue:
    return PresenceValue()


def _decode_regex(text: str) -> RuleValue:
    candidate = text.strip()
    if candidate.startswith("{"):
        try:
            payload = json.loads(candidate)
        except ValueError:
            payload = None
        if isinstance(payload, Mapping) and "pattern" in payload:
            return _parse_regex(payload)
    return _build_regex(text)


def _decode_list(text: str) -> RuleValue:
    return _build_list(text.split(","))


def _decode_range(text: str) -> RuleValue:
    match = _RANGE_TEXT_PATTERN.match(text)
    if match is None:
        raise MalformedRuleValue(
            f"Range must look like '<min>-<max>' (for example 0-1000), got {text!r}"
        )
    return _build_range(_to_number(match.group("min")), _to_number(match.group("max")))


def _decode_custom(text: str) -> RuleValue:
    return CustomValue(expression=text)


def _parse_presence(raw: Any) -> RuleValue:
    if isinstance(raw, Mapping) and raw.get("required") is True:
        return PresenceValue()
    raise MalformedRuleValue('A presence rule value must be {"required": true}')


def _parse_regex(raw: Any) -> RuleValue:
    # Older clients stored the bare pattern string.
    if isinstance(raw, str):
        return _build_regex(raw)
    if isinstance(raw, Mapping):
        return _build_regex(raw.get("pattern"), raw.get("flags"))
    raise MalformedRuleValue('A regex rule value must be {"pattern": "..."}')


def _parse_list(raw: Any) -> RuleValue:
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        return _build_list(raw)
    raise MalformedRuleValue("A list rule value must be an array of strings")


def _parse_range(raw: Any) -> RuleValue:
    if isinstance(raw, Mapping) and "min" in raw and "max" in raw:
        return _build_range(raw["min"], raw["max"])
    raise MalformedRuleValue('A range rule value must be {"min": <number>, "max": <number>}')


def _parse_custom(raw: Any) -> RuleValue:
    if isinstance(raw, str):
        return CustomValue(expression=raw)
    raise MalformedRuleValue("A custom rule value must be a string")


def _format_number(value: int | float) -> str:
    return str(value) if isinstance(value, int) else repr(value)


def _encode_presence(value: RuleValue) -> str:
    return _serialize(value.to_json())


def _encode_regex(value: RuleValue) -> str:
    assert isinstance(value, RegexValue)
    # A bare pattern that looks like JSON would be decoded as a payload.
    if value.flags or value.pattern.lstrip().startswith("{"):
        return _serialize(value.to_json())
    return value.pattern


def _encode_list(value: RuleValue) -> str:
    assert isinstance(value, ListValue)
    return ", ".join(value.entries)


def _encode_range(value: RuleValue) -> str:
    assert isinstance(value, RangeValue)
    return f"{_format_number(value.min)}-{_format_number(value.max)}"


def _encode_custom(value: RuleValue) -> str:
    assert isinstance(value, CustomValue)
    return value.expression


_DECODERS = {
    RULE_KIND_PRESENCE: _decode_presence,
    RULE_KIND_REGEX: _decode_regex,
    RULE_KIND_LIST: _decode_list,
    RULE_KIND_RANGE: _decode_range,
    RULE_KIND_CUSTOM: _decode_custom,
}

_PARSERS = {
    RULE_KIND_PRESENCE: _parse_presence,
    RULE_KIND_REGEX: _parse_regex,
    RULE_KIND_LIST: _parse_list,
    RULE_KIND_RANGE: _parse_range,
    RULE_KIND_CUSTOM: _parse_custom,
}

_ENCODERS = {
    RULE_KIND_PRESENCE: _encode_presence,
    RULE_KIND_REGEX: _encode_regex,
    RULE_KIND_LIST: _encode_list,
    RULE_KIND_RANGE: _encode_range,
    RULE_KIND_CUSTOM: _encode_custom,
}


__all__ = [
    "CustomValue",
    "ListValue",
    "PresenceValue",
    "RangeValue",
    "RegexValue",
    "RuleValue",
    "decode_rule_value",
    "default_rule_value",
    "encode_rule_value",
    "ensure_rule_kind",
    "parse_rule_value",
]
