"""SQLAlchemy model for violation reports."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from app.domain.entities import REPORT_STATUS_OPEN, SEVERITY_MEDIUM
from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class ReportModel(Base):
    """Database representation of a report filed against a product."""

    __tablename__ = "reports"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    product_id = Column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reporter_id = Column(String(36), nullable=True)
    license_number = Column(Text, nullable=True)
    violation_details = Column(Text, nullable=False)
    violation_type = Column(Text, nullable=True)
    severity = Column(
        String(10), nullable=False, default=SEVERITY_MEDIUM, server_default=SEVERITY_MEDIUM
    )
    status = Column(
        String(20),
        nullable=False,
        default=REPORT_STATUS_OPEN,
        server_default=REPORT_STATUS_OPEN,
    )
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=True,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["ReportModel"]
