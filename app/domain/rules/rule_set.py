"""In-memory, thread-safe collection of compliance rules."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from app.domain.entities import EvaluationResult, Rule

from .definition import (
    ensure_rule_name,
    ensure_target_field,
    prepare_rule_definition,
    resolve_updated_value,
)
from .errors import NotFound
from .evaluation import evaluate_all
from .registry import CustomEvaluatorRegistry


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class RuleSet:
    """Hold rules and serve consistent snapshots to concurrent readers.

    Writers are serialized by a lock and publish a new immutable tuple; readers
    never block and always see a complete state. Rules handed to the
    constructor are kept as loaded, so corrupt stored rules survive until
    evaluation reports them.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._lock = threading.Lock()
        self._rules: tuple[Rule, ...] = tuple(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def snapshot(self) -> tuple[Rule, ...]:
        return self._rules

    def get(self, rule_id: str) -> Rule:
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        raise NotFound(f"Rule {rule_id} not found")

    def list(
        self, *, active: bool | None = None, target_field: str | None = None
    ) -> list[Rule]:
        return [
            rule
            for rule in self._rules
            if (active is None or rule.is_active is active)
            and (target_field is None or rule.target_field == target_field)
        ]

    def active(self) -> list[Rule]:
        return self.list(active=True)

    def by_target_field(self, target_field: str) -> list[Rule]:
        return self.list(target_field=target_field)

    def add(
        self,
        name: str,
        target_field: str,
        kind: str,
        value: Any = None,
        *,
        description: str | None = None,
        is_active: bool = True,
        created_by: str | None = None,
    ) -> Rule:
        """Validate and append a new rule, assigning its id."""

        name, target_field, kind, parsed = prepare_rule_definition(
            name=name, target_field=target_field, kind=kind, value=value
        )
        now = _utcnow()
        rule = Rule(
            id=str(uuid4()),
            name=name,
            target_field=target_field,
            kind=kind,
            value=parsed.to_json(),
            description=description,
            is_active=is_active,
            created_by=created_by,
            created_at=now,
            updated_at=None,
        )
        with self._lock:
            self._rules = self._rules + (rule,)
        return rule

    def update(
        self,
        rule_id: str,
        *,
        name: str | None = None,
        target_field: str | None = None,
        kind: str | None = None,
        value: Any = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> Rule:
        """Overwrite the given attributes of a rule in place."""

        with self._lock:
            index, current = self._locate(rule_id)
            new_kind, parsed = resolve_updated_value(current, kind=kind, value=value)
            updated = replace(
                current,
                name=ensure_rule_name(name) if name is not None else current.name,
                target_field=(
                    ensure_target_field(target_field)
                    if target_field is not None
                    else current.target_field
                ),
                kind=new_kind,
                value=parsed.to_json(),
                description=description if description is not None else current.description,
                is_active=is_active if is_active is not None else current.is_active,
                updated_at=_utcnow(),
            )
            self._rules = self._rules[:index] + (updated,) + self._rules[index + 1 :]
        return updated

    def set_active(self, rule_id: str, active: bool) -> Rule:
        with self._lock:
            index, current = self._locate(rule_id)
            updated = replace(current, is_active=bool(active), updated_at=_utcnow())
            self._rules = self._rules[:index] + (updated,) + self._rules[index + 1 :]
        return updated

    def remove(self, rule_id: str) -> None:
        """Delete a rule; unknown ids raise :class:`NotFound`."""

        with self._lock:
            index, _ = self._locate(rule_id)
            self._rules = self._rules[:index] + self._rules[index + 1 :]

    def evaluate(
        self, product: Any, *, evaluators: CustomEvaluatorRegistry | None = None
    ) -> EvaluationResult:
        return evaluate_all(self._rules, product, evaluators=evaluators)

    def _locate(self, rule_id: str) -> tuple[int, Rule]:
        for index, rule in enumerate(self._rules):
            if rule.id == rule_id:
                return index, rule
        raise NotFound(f"Rule {rule_id} not found")


__all__ = ["RuleSet"]
