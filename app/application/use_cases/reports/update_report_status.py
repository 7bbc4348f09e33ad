"""Use case for moving a report through its review workflow."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Report
from app.infrastructure.repositories import ReportRepository
from .validators import ensure_report_status

logger = logging.getLogger(__name__)


def update_report_status(session: Session, *, report_id: str, status: str) -> Report:
    status = ensure_report_status(status)
    report = ReportRepository(session).update_status(report_id, status)
    logger.info("Report %s moved to %s", report_id, status)
    return report
