"""Routes for reviewing violation reports."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.reports import update_report_status as update_report_status_uc
from app.domain.entities import User
from app.domain.rules import StorageError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_admin
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import ReportRead, ReportStatusUpdate

router = APIRouter(prefix="/reports", tags=["reports"])


@router.patch("/{report_id}/status", response_model=ReportRead)
def update_report_status(
    report_id: str,
    status_in: ReportStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> ReportRead:
    """Move a report to ``open``, ``in-progress``, ``resolved`` or ``closed``."""

    try:
        report = update_report_status_uc(db, report_id=report_id, status=status_in.status)
    except (ValueError, StorageError) as exc:
        raise to_http_exception(exc) from exc
    return ReportRead.model_validate(report)
