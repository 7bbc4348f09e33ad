"""Persistence layer for compliance rules."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc, false, true
from sqlalchemy.orm import Session

from app.domain.entities import Rule
from app.domain.rules import NotFound
from app.infrastructure.models import RuleModel

from .errors import storage_errors


class RuleRepository:
    """Provide CRUD operations for compliance rules."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        active: bool | None = None,
        target_field: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> Sequence[Rule]:
        with storage_errors(self.session, "listing rules"):
            query = self.session.query(RuleModel)
            if active is not None:
                query = query.filter(RuleModel.is_active == (true() if active else false()))
            if target_field is not None:
                query = query.filter(RuleModel.field_to_validate == target_field)
            query = query.order_by(desc(RuleModel.created_at), desc(RuleModel.id))
            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return [self._to_entity(model) for model in query.all()]

    def get(self, rule_id: str) -> Rule | None:
        with storage_errors(self.session, "loading a rule"):
            model = self.session.get(RuleModel, rule_id)
            return self._to_entity(model) if model else None

    def create(self, rule: Rule) -> Rule:
        with storage_errors(self.session, "creating a rule"):
            model = RuleModel()
            if rule.id is not None:
                model.id = rule.id
            self._apply_entity_to_model(model, rule)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
            return self._to_entity(model)

    def update(self, rule: Rule) -> Rule:
        with storage_errors(self.session, "updating a rule"):
            model = self.session.get(RuleModel, rule.id)
            if model is None:
                raise NotFound(f"Rule {rule.id} not found")
            self._apply_entity_to_model(model, rule)
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
            return self._to_entity(model)

    def delete(self, rule_id: str) -> None:
        with storage_errors(self.session, "deleting a rule"):
            model = self.session.get(RuleModel, rule_id)
            if model is None:
                raise NotFound(f"Rule {rule_id} not found")
            self.session.delete(model)
            self.session.commit()

    @staticmethod
    def _to_entity(model: RuleModel) -> Rule:
        return Rule(
            id=model.id,
            name=model.rule_name,
            target_field=model.field_to_validate,
            kind=model.rule_type,
            value=model.rule_value,
            description=model.description,
            is_active=model.is_active,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: RuleModel, rule: Rule) -> None:
        model.rule_name = rule.name
        model.field_to_validate = rule.target_field
        model.rule_type = rule.kind
        model.rule_value = rule.value
        model.description = rule.description
        model.is_active = rule.is_active
        model.created_by = rule.created_by
        if rule.created_at is not None:
            model.created_at = rule.created_at


__all__ = ["RuleRepository"]
