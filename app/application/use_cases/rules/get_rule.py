"""Use case for retrieving a single compliance rule."""

from sqlalchemy.orm import Session

from app.domain.entities import Rule
from app.domain.rules import NotFound
from app.infrastructure.repositories import RuleRepository


def get_rule(session: Session, rule_id: str) -> Rule:
    """Return the rule identified by ``rule_id`` or raise an error."""

    rule = RuleRepository(session).get(rule_id)
    if rule is None:
        raise NotFound(f"Rule {rule_id} not found")
    return rule
