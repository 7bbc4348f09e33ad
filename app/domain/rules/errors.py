"""Errors raised by the rule engine and its persistence boundary."""

from __future__ import annotations


class RuleEngineError(ValueError):
    """Base class for every error reported by the rule engine."""


class InvalidRuleKind(RuleEngineError):
    """The rule kind is not one of the supported kinds."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unsupported rule kind: {kind!r}")
        self.kind = kind


class MalformedRuleValue(RuleEngineError):
    """The rule value does not have the shape its kind requires."""


class InvalidPattern(RuleEngineError):
    """A regex rule carries a pattern or flags that cannot be compiled."""


class CorruptRule(RuleEngineError):
    """A stored rule cannot be evaluated because its value does not match its kind."""

    def __init__(self, rule_id: str | None, reason: str) -> None:
        super().__init__(f"Rule {rule_id} is corrupt: {reason}")
        self.rule_id = rule_id
        self.reason = reason


class NotFound(RuleEngineError, LookupError):
    """The requested rule, product or report does not exist."""


class StorageError(RuntimeError):
    """The data store failed; the original exception is kept as ``__cause__``."""


__all__ = [
    "CorruptRule",
    "InvalidPattern",
    "InvalidRuleKind",
    "MalformedRuleValue",
    "NotFound",
    "RuleEngineError",
    "StorageError",
]
