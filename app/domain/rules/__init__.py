"""Compliance rule engine: value codec, evaluation and rule-set management."""

from .definition import prepare_rule_definition, resolve_updated_value
from .errors import (
    CorruptRule,
    InvalidPattern,
    InvalidRuleKind,
    MalformedRuleValue,
    NotFound,
    RuleEngineError,
    StorageError,
)
from .evaluation import evaluate, evaluate_all, read_product_field
from .registry import CustomEvaluator, CustomEvaluatorRegistry, custom_evaluators
from .rule_set import RuleSet
from .values import (
    CustomValue,
    ListValue,
    PresenceValue,
    RangeValue,
    RegexValue,
    RuleValue,
    decode_rule_value,
    default_rule_value,
    encode_rule_value,
    ensure_rule_kind,
    parse_rule_value,
)

__all__ = [
    "CorruptRule",
    "CustomEvaluator",
    "CustomEvaluatorRegistry",
    "CustomValue",
    "InvalidPattern",
    "InvalidRuleKind",
    "ListValue",
    "MalformedRuleValue",
    "NotFound",
    "PresenceValue",
    "RangeValue",
    "RegexValue",
    "RuleEngineError",
    "RuleSet",
    "RuleValue",
    "StorageError",
    "custom_evaluators",
    "decode_rule_value",
    "default_rule_value",
    "encode_rule_value",
    "ensure_rule_kind",
    "evaluate",
    "evaluate_all",
    "parse_rule_value",
    "prepare_rule_definition",
    "read_product_field",
    "resolve_updated_value",
]
