"""Use case for activating or deactivating a compliance rule."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import Rule
from app.infrastructure.repositories import RuleRepository
from app.utils import now_in_app_timezone
from .get_rule import get_rule

logger = logging.getLogger(__name__)


def set_rule_active(session: Session, *, rule_id: str, is_active: bool) -> Rule:
    """Toggle whether a rule takes part in evaluation without touching its value."""

    current = get_rule(session, rule_id)
    rule = RuleRepository(session).update(
        replace(current, is_active=is_active, updated_at=now_in_app_timezone())
    )
    logger.info("Rule %s %s", rule.id, "activated" if is_active else "deactivated")
    return rule
