"""Use case for listing compliance rules."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Rule
from app.domain.rules.definition import ensure_target_field
from app.infrastructure.repositories import RuleRepository


def list_rules(
    session: Session,
    *,
    active: bool | None = None,
    target_field: str | None = None,
    skip: int = 0,
    limit: int | None = None,
) -> Sequence[Rule]:
    """Return rules, newest first, optionally filtered by state and field."""

    if target_field is not None:
        target_field = ensure_target_field(target_field)
    return RuleRepository(session).list(
        active=active, target_field=target_field, skip=skip, limit=limit
    )
