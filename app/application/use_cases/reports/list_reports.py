"""Use case for listing the reports filed against a product."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Report
from app.infrastructure.repositories import ReportRepository
from app.application.use_cases.products import get_product


def list_reports(session: Session, *, product_id: str) -> Sequence[Report]:
    """Return the product's reports, newest first."""

    get_product(session, product_id)
    return ReportRepository(session).list(product_id=product_id)
