"""Use case for updating compliance rules."""

import logging
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Rule
from app.domain.rules import resolve_updated_value
from app.domain.rules.definition import ensure_rule_name, ensure_target_field
from app.infrastructure.repositories import RuleRepository
from app.utils import now_in_app_timezone
from .get_rule import get_rule
from .validators import resolve_value_input

logger = logging.getLogger(__name__)


def update_rule(
    session: Session,
    *,
    rule_id: str,
    name: str | None = None,
    target_field: str | None = None,
    kind: str | None = None,
    value: Any = None,
    value_text: str | None = None,
    description: str | None = None,
    is_active: bool | None = None,
) -> Rule:
    """Overwrite the supplied attributes of a rule.

    Kind and value are re-validated together; see
    :func:`app.domain.rules.resolve_updated_value` for what happens when only
    the kind changes.
    """

    current = get_rule(session, rule_id)
    raw_value = resolve_value_input(
        kind if kind is not None else current.kind, value=value, value_text=value_text
    )
    new_kind, parsed = resolve_updated_value(current, kind=kind, value=raw_value)

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
        updated_at=now_in_app_timezone(),
    )
    rule = RuleRepository(session).update(updated)
    logger.info("Rule %s updated", rule.id)
    return rule
