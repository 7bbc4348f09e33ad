"""Tests for decoding and encoding rule values."""

from __future__ import annotations

import pytest

from app.domain.rules import (
    CustomValue,
    InvalidPattern,
    InvalidRuleKind,
    ListValue,
    MalformedRuleValue,
    PresenceValue,
    RangeValue,
    RegexValue,
    decode_rule_value,
    default_rule_value,
    encode_rule_value,
    parse_rule_value,
)


def test_decode_range_text() -> None:
    value = decode_rule_value("range", "0-1000")

    assert value == RangeValue(min=0, max=1000)
    assert value.to_json() == {"min": 0, "max": 1000}
    assert encode_rule_value("range", value) == "0-1000"


def test_decode_range_accepts_decimals_and_spaces() -> None:
    value = decode_rule_value("range", " 0.5 - 99.75 ")

    assert value == RangeValue(min=0.5, max=99.75)
    assert encode_rule_value("range", value) == "0.5-99.75"


@pytest.mark.parametrize("text", ["10-5", "abc", "", "5", "1-2-3"])
def test_decode_range_rejects_bad_text(text: str) -> None:
    with pytest.raises(MalformedRuleValue):
        decode_rule_value("range", text)


def test_decode_regex_rejects_invalid_pattern() -> None:
    with pytest.raises(InvalidPattern):
        decode_rule_value("regex", "[")


def test_decode_regex_rejects_empty_pattern() -> None:
    with pytest.raises(MalformedRuleValue):
        decode_rule_value("regex", "")


def test_regex_round_trip_with_and_without_flags() -> None:
    plain = decode_rule_value("regex", r"^\d+ g$")
    assert plain == RegexValue(pattern=r"^\d+ g$")
    assert encode_rule_value("regex", plain) == r"^\d+ g$"

    flagged = parse_rule_value("regex", {"pattern": "^[a-z]+$", "flags": "si"})
    assert flagged.flags == "is"
    text = encode_rule_value("regex", flagged)
    assert decode_rule_value("regex", text) == flagged


def test_regex_rejects_unknown_flag() -> None:
    with pytest.raises(InvalidPattern):
        parse_rule_value("regex", {"pattern": "abc", "flags": "q"})


def test_stored_bare_regex_string_is_accepted() -> None:
    assert parse_rule_value("regex", "^IN$") == RegexValue(pattern="^IN$")


def test_decode_list_trims_and_drops_empty_entries() -> None:
    value = decode_rule_value("list", " India, Nepal ,, Bhutan ")

    assert value == ListValue(entries=("India", "Nepal", "Bhutan"))
    assert value.to_json() == ["India", "Nepal", "Bhutan"]
    assert encode_rule_value("list", value) == "India, Nepal, Bhutan"


def test_decode_list_requires_an_entry() -> None:
    with pytest.raises(MalformedRuleValue):
        decode_rule_value("list", " , ")


def test_presence_ignores_text_and_has_a_default() -> None:
    assert decode_rule_value("presence", "anything") == PresenceValue()
    assert default_rule_value("presence") == PresenceValue()
    assert default_rule_value("range") is None
    assert encode_rule_value("presence", {"required": True}) == '{"required": true}'


def test_custom_value_keeps_text_verbatim() -> None:
    value = decode_rule_value("custom", "  fssai-license  ")

    assert value == CustomValue(expression="  fssai-license  ")
    assert encode_rule_value("custom", value) == "  fssai-license  "


def test_kind_is_case_insensitive_and_validated() -> None:
    assert decode_rule_value(" Range ", "1-2") == RangeValue(min=1, max=2)
    with pytest.raises(InvalidRuleKind):
        decode_rule_value("checksum", "x")


def test_parse_rejects_payload_of_another_kind() -> None:
    with pytest.raises(MalformedRuleValue):
        parse_rule_value("range", ["India"])
    with pytest.raises(MalformedRuleValue):
        parse_rule_value("list", RangeValue(min=1, max=2))
    with pytest.raises(MalformedRuleValue):
        parse_rule_value("range", {"min": True, "max": 2})


def test_encode_mismatched_payload_falls_back_to_json() -> None:
    assert encode_rule_value("range", ["India"]) == '["India"]'


def test_list_entries_with_commas_are_rejected() -> None:
    with pytest.raises(MalformedRuleValue):
        parse_rule_value("list", ["Korea, Republic of", "India"])


@pytest.mark.parametrize(
    "value",
    [
        ListValue(entries=("Korea Republic of", "India")),
        RegexValue(pattern='{"pattern": "a"}'),
        RegexValue(pattern=' {"pattern": "a", "flags": "i"}'),
        RegexValue(pattern="{abc"),
        RegexValue(pattern="^IN$", flags="i"),
        RangeValue(min=-5, max=2.5),
        CustomValue(expression='{"pattern": "a"}'),
    ],
)
def test_accepted_values_survive_encoding(value) -> None:
    accepted = parse_rule_value(value.kind, value)

    assert decode_rule_value(value.kind, encode_rule_value(value.kind, accepted)) == accepted
