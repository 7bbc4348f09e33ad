"""Use case for filing a violation report against a product."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import (
    COMPLIANCE_STATUS_NON_COMPLIANT,
    REPORT_STATUS_OPEN,
    SEVERITY_MEDIUM,
    Report,
)
from app.domain.rules import StorageError
from app.infrastructure.repositories import ProductRepository, ReportRepository
from app.infrastructure.repositories.errors import storage_errors
from app.application.use_cases.products import get_product
from .validators import ensure_severity, ensure_violation_type

logger = logging.getLogger(__name__)


def create_report(
    session: Session,
    *,
    product_id: str,
    reporter_id: str,
    violation_details: str,
    violation_type: str | None = None,
    license_number: str | None = None,
    severity: str = SEVERITY_MEDIUM,
) -> Report:
    """Store the report and mark the product ``non-compliant``.

    Both writes are committed together; if either fails neither is kept.
    """

    if not isinstance(violation_details, str) or not violation_details.strip():
        raise ValueError("Violation details must not be empty")
    product = get_product(session, product_id)
    entity = Report(
        id=None,
        product_id=product.id,
        reporter_id=reporter_id,
        license_number=(license_number or "").strip() or None,
        violation_details=violation_details.strip(),
        violation_type=ensure_violation_type(violation_type),
        severity=ensure_severity(severity),
        status=REPORT_STATUS_OPEN,
        created_at=None,
        updated_at=None,
    )

    try:
        report = ReportRepository(session).create(entity, commit=False)
        if product.compliance_status != COMPLIANCE_STATUS_NON_COMPLIANT:
            ProductRepository(session).update_status(
                product.id, COMPLIANCE_STATUS_NON_COMPLIANT, commit=False
            )
        with storage_errors(session, "filing a report"):
            session.commit()
    except (StorageError, ValueError):
        session.rollback()
        raise

    logger.info("Report %s filed against product %s by %s", report.id, product.id, reporter_id)
    return report
