"""Routes for authoring compliance rules."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.rules import (
    create_rule as create_rule_uc,
    delete_rule as delete_rule_uc,
    get_rule as get_rule_uc,
    list_rules as list_rules_uc,
    set_rule_active as set_rule_active_uc,
    update_rule as update_rule_uc,
)
from app.domain.entities import Rule, User
from app.domain.rules import (
    InvalidRuleKind,
    RuleEngineError,
    StorageError,
    decode_rule_value,
    encode_rule_value,
)
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user, require_admin
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    RuleCreate,
    RuleRead,
    RuleStatusUpdate,
    RuleUpdate,
    RuleValuePreview,
    RuleValuePreviewRequest,
)

router = APIRouter(prefix="/rules", tags=["rules"])


def _to_read_model(rule: Rule) -> RuleRead:
    try:
        value_text = encode_rule_value(rule.kind, rule.value)
    except InvalidRuleKind:
        value_text = None
    return RuleRead.model_validate({**asdict(rule), "value_text": value_text})


@router.get("/", response_model=list[RuleRead])
def list_rules(
    active: bool | None = Query(None, description="Only rules in this state"),
    target_field: str | None = Query(None, description="Only rules inspecting this field"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[RuleRead]:
    """Return rules, newest first."""

    try:
        rules = list_rules_uc(
            db, active=active, target_field=target_field, skip=skip, limit=limit
        )
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return [_to_read_model(rule) for rule in rules]


@router.post("/", response_model=RuleRead, status_code=status.HTTP_201_CREATED)
def register_rule(
    rule_in: RuleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> RuleRead:
    """Create a new compliance rule."""

    try:
        rule = create_rule_uc(
            db,
            name=rule_in.name,
            target_field=rule_in.target_field,
            kind=rule_in.kind,
            value=rule_in.value,
            value_text=rule_in.value_text,
            description=rule_in.description,
            is_active=rule_in.is_active,
            created_by=current_user.id,
        )
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(rule)


@router.post("/preview", response_model=RuleValuePreview)
def preview_rule_value(
    preview_in: RuleValuePreviewRequest,
    _: User = Depends(get_current_user),
) -> RuleValuePreview:
    """Decode rule form text without saving anything."""

    try:
        value = decode_rule_value(preview_in.kind, preview_in.value_text)
    except RuleEngineError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return RuleValuePreview(
        kind=value.kind,
        value=value.to_json(),
        value_text=encode_rule_value(value.kind, value),
    )


@router.get("/{rule_id}", response_model=RuleRead)
def read_rule(
    rule_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> RuleRead:
    """Return the rule identified by ``rule_id``."""

    try:
        rule = get_rule_uc(db, rule_id)
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(rule)


@router.put("/{rule_id}", response_model=RuleRead)
def update_rule(
    rule_id: str,
    rule_in: RuleUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> RuleRead:
    """Overwrite the supplied attributes of a rule."""

    try:
        rule = update_rule_uc(
            db,
            rule_id=rule_id,
            name=rule_in.name,
            target_field=rule_in.target_field,
            kind=rule_in.kind,
            value=rule_in.value,
            value_text=rule_in.value_text,
            description=rule_in.description,
            is_active=rule_in.is_active,
        )
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(rule)


@router.patch("/{rule_id}/status", response_model=RuleRead)
def update_rule_status(
    rule_id: str,
    status_in: RuleStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> RuleRead:
    """Activate or deactivate a rule."""

    try:
        rule = set_rule_active_uc(db, rule_id=rule_id, is_active=status_in.is_active)
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(rule)


@router.delete("/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rule(
    rule_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> Response:
    """Delete a rule."""

    try:
        delete_rule_uc(db, rule_id)
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
