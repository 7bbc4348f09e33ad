"""Use case for creating compliance rules."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Rule
from app.domain.rules import prepare_rule_definition
from app.infrastructure.repositories import RuleRepository
from app.utils import now_in_app_timezone
from .validators import resolve_value_input

logger = logging.getLogger(__name__)


def create_rule(
    session: Session,
    *,
    name: str,
    target_field: str,
    kind: str,
    value: Any = None,
    value_text: str | None = None,
    description: str | None = None,
    is_active: bool = True,
    created_by: str | None = None,
) -> Rule:
    """Validate and store a new compliance rule."""

    raw_value = resolve_value_input(kind, value=value, value_text=value_text)
    name, target_field, kind, parsed = prepare_rule_definition(
        name=name, target_field=target_field, kind=kind, value=raw_value
    )

    entity = Rule(
        id=None,
        name=name,
        target_field=target_field,
        kind=kind,
        value=parsed.to_json(),
        description=description,
        is_active=is_active,
        created_by=created_by,
        created_at=now_in_app_timezone(),
        updated_at=None,
    )
    rule = RuleRepository(session).create(entity)
    logger.info("Rule %s (%s) created by %s", rule.id, rule.name, created_by)
    return rule
