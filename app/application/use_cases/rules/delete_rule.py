"""Use case for deleting compliance rules."""

import logging

from sqlalchemy.orm import Session

from app.infrastructure.repositories import RuleRepository

logger = logging.getLogger(__name__)


def delete_rule(session: Session, rule_id: str) -> None:
    """Delete the specified rule; unknown ids raise ``NotFound``."""

    RuleRepository(session).delete(rule_id)
    logger.info("Rule %s deleted", rule_id)
