"""Transient results produced when rules are evaluated against a product."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Violation:
    """A single rule failing on a single product field."""

    field: str
    rule_name: str
    message: str
    severity: str


@dataclass
class EvaluationResult:
    """Violations found for a product plus the rules that could not be evaluated."""

    violations: list[Violation] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def compliant(self) -> bool:
        return not self.violations


__all__ = ["EvaluationResult", "Violation"]
