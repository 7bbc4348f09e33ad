"""Domain entity representing a violation report filed by a reviewer."""

from dataclasses import dataclass
from datetime import datetime

SEVERITY_LOW = "low"
SEVERITY_MEDIUM = "medium"
SEVERITY_HIGH = "high"

SEVERITIES: tuple[str, ...] = (SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH)

REPORT_STATUS_OPEN = "open"
REPORT_STATUS_IN_PROGRESS = "in-progress"
REPORT_STATUS_RESOLVED = "resolved"
REPORT_STATUS_CLOSED = "closed"

REPORT_STATUSES: tuple[str, ...] = (
    REPORT_STATUS_OPEN,
    REPORT_STATUS_IN_PROGRESS,
    REPORT_STATUS_RESOLVED,
    REPORT_STATUS_CLOSED,
)

VIOLATION_TYPES: dict[str, str] = {
    "missing_mrp": "Missing MRP",
    "missing_manufacturer": "Missing Manufacturer Details",
    "missing_net_quantity": "Missing Net Quantity",
    "missing_country_origin": "Missing Country of Origin",
    "missing_consumer_care": "Missing Consumer Care Details",
    "incorrect_information": "Incorrect Information",
    "misleading_claims": "Misleading Claims",
    "other": "Other",
}


@dataclass
class Report:
    """A reviewer's account of a labelling violation on a product."""

    id: str | None
    product_id: str
    reporter_id: str | None
    license_number: str | None
    violation_details: str
    violation_type: str | None
    severity: str
    status: str
    created_at: datetime | None
    updated_at: datetime | None


__all__ = [
    "REPORT_STATUSES",
    "REPORT_STATUS_CLOSED",
    "REPORT_STATUS_IN_PROGRESS",
    "REPORT_STATUS_OPEN",
    "REPORT_STATUS_RESOLVED",
    "Report",
    "SEVERITIES",
    "SEVERITY_HIGH",
    "SEVERITY_LOW",
    "SEVERITY_MEDIUM",
    "VIOLATION_TYPES",
]
