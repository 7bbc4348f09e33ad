"""Persistence layer for violation reports."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import Session

from app.domain.entities import Report
from app.domain.rules import NotFound
from app.infrastructure.models import ReportModel

from .errors import storage_errors


class ReportRepository:
    """Provide create, read and status updates for reports."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, product_id: str | None = None) -> Sequence[Report]:
        with storage_errors(self.session, "listing reports"):
            query = self.session.query(ReportModel)
            if product_id is not None:
                query = query.filter(ReportModel.product_id == product_id)
            query = query.order_by(desc(ReportModel.created_at), desc(ReportModel.id))
            return [self._to_entity(model) for model in query.all()]

    def get(self, report_id: str) -> Report | None:
        with storage_errors(self.session, "loading a report"):
            model = self.session.get(ReportModel, report_id)
            return self._to_entity(model) if model else None

    def create(self, report: Report, *, commit: bool = True) -> Report:
        with storage_errors(self.session, "creating a report"):
            model = ReportModel(
                product_id=report.product_id,
                reporter_id=report.reporter_id,
                license_number=report.license_number,
                violation_details=report.violation_details,
                violation_type=report.violation_type,
                severity=report.severity,
                status=report.status,
            )
            self.session.add(model)
            if commit:
                self.session.commit()
            else:
                self.session.flush()
            self.session.refresh(model)
            return self._to_entity(model)

    def update_status(self, report_id: str, status: str) -> Report:
        with storage_errors(self.session, "updating a report status"):
            model = self.session.get(ReportModel, report_id)
            if model is None:
                raise NotFound(f"Report {report_id} not found")
            model.status = status
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
            return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ReportModel) -> Report:
        return Report(
            id=model.id,
            product_id=model.product_id,
            reporter_id=model.reporter_id,
            license_number=model.license_number,
            violation_details=model.violation_details,
            violation_type=model.violation_type,
            severity=model.severity,
            status=model.status,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["ReportRepository"]
