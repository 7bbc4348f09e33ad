"""Registry of externally supplied evaluators for ``custom`` rules."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from app.domain.entities import Rule, Violation

# An evaluator returns ``None`` when the product passes, a failure message, or
# a fully built :class:`Violation` when it wants to control the severity.
CustomEvaluator = Callable[[Rule, Any], "Violation | str | None"]


class CustomEvaluatorRegistry:
    """Map rule ids or rule names to custom evaluator callables.

    Lookups try the rule id first and fall back to the rule name, so an
    evaluator can be bound to one specific stored rule or to every rule that
    shares a name.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._evaluators: dict[str, CustomEvaluator] = {}

    def register(self, key: str, evaluator: CustomEvaluator) -> None:
        if not isinstance(key, str) or not key.strip():
            raise ValueError("Custom evaluators must be registered under a non-empty key")
        if not callable(evaluator):
            raise ValueError("Custom evaluators must be callable")
        with self._lock:
            self._evaluators[key.strip()] = evaluator

    def unregister(self, key: str) -> None:
        with self._lock:
            self._evaluators.pop(key.strip(), None)

    def resolve(self, rule: Rule) -> CustomEvaluator | None:
        """Return the evaluator bound to ``rule`` or ``None``."""

        with self._lock:
            for key in (rule.id, rule.name):
                if key and key.strip() in self._evaluators:
                    return self._evaluators[key.strip()]
        return None

    def clear(self) -> None:
        with self._lock:
            self._evaluators.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip() in self._evaluators

    def __len__(self) -> int:
        return len(self._evaluators)


custom_evaluators = CustomEvaluatorRegistry()


__all__ = ["CustomEvaluator", "CustomEvaluatorRegistry", "custom_evaluators"]
