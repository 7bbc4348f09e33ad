"""Routes for the product compliance dashboard."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.products import (
    evaluate_product as evaluate_product_uc,
    get_product as get_product_uc,
    list_products as list_products_uc,
    update_product_status as update_product_status_uc,
)
from app.application.use_cases.reports import (
    create_report as create_report_uc,
    list_reports as list_reports_uc,
)
from app.domain.entities import User
from app.domain.rules import CustomEvaluatorRegistry, StorageError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import (
    get_current_user,
    get_custom_evaluators,
    require_admin,
)
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    ProductEvaluationRead,
    ProductRead,
    ProductStatusUpdate,
    ReportCreate,
    ReportRead,
    ViolationRead,
)

router = APIRouter(prefix="/products", tags=["products"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[ProductRead])
def list_products(
    search: str | None = Query(None, description="Match on name or manufacturer"),
    compliance_status: str | None = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[ProductRead]:
    """Return the products shown on the compliance dashboard."""

    try:
        products = list_products_uc(
            db, search=search, status=compliance_status, skip=skip, limit=limit
        )
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return [ProductRead.model_validate(product) for product in products]


@router.get("/{product_id}", response_model=ProductRead)
def read_product(
    product_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> ProductRead:
    try:
        product = get_product_uc(db, product_id)
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return ProductRead.model_validate(product)


@router.patch("/{product_id}/status", response_model=ProductRead)
def update_product_status(
    product_id: str,
    status_in: ProductStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> ProductRead:
    """Record the compliance status decided by a reviewer."""

    try:
        product = update_product_status_uc(
            db, product_id=product_id, status=status_in.compliance_status
        )
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return ProductRead.model_validate(product)


@router.post("/{product_id}/evaluate", response_model=ProductEvaluationRead)
def evaluate_product(
    product_id: str,
    apply_status: bool = Query(
        False,
        description=(
            "Also mark the product compliant or non-compliant from the outcome. "
            "Requires administrator privileges."
        ),
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    evaluators: CustomEvaluatorRegistry = Depends(get_custom_evaluators),
) -> ProductEvaluationRead:
    """Run every active rule against the product."""

    if apply_status and not current_user.is_admin():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")

    try:
        evaluation = evaluate_product_uc(
            db, product_id=product_id, apply_status=apply_status, evaluators=evaluators
        )
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc

    result = evaluation.result
    if result.skipped:
        logger.warning(
            "Evaluation of product %s skipped corrupt rules: %s",
            product_id,
            ", ".join(str(rule_id) for rule_id in result.skipped),
        )
    return ProductEvaluationRead(
        product_id=evaluation.product.id,
        compliant=result.compliant,
        violations=[ViolationRead.model_validate(violation) for violation in result.violations],
        skipped=list(result.skipped),
        compliance_status=evaluation.product.compliance_status,
        status_applied=evaluation.status_applied,
    )


@router.get("/{product_id}/reports", response_model=list[ReportRead])
def list_product_reports(
    product_id: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
) -> list[ReportRead]:
    try:
        reports = list_reports_uc(db, product_id=product_id)
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return [ReportRead.model_validate(report) for report in reports]


@router.post(
    "/{product_id}/reports",
    response_model=ReportRead,
    status_code=status.HTTP_201_CREATED,
)
def file_report(
    product_id: str,
    report_in: ReportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ReportRead:
    """File a violation report; the product is marked non-compliant."""

    try:
        report = create_report_uc(
            db,
            product_id=product_id,
            reporter_id=current_user.id,
            violation_details=report_in.violation_details,
            violation_type=report_in.violation_type,
            license_number=report_in.license_number,
            severity=report_in.severity,
        )
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return ReportRead.model_validate(report)
