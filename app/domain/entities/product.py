"""Domain entity representing a listed product."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

COMPLIANCE_STATUS_COMPLIANT = "compliant"
COMPLIANCE_STATUS_NON_COMPLIANT = "non-compliant"
COMPLIANCE_STATUS_PENDING = "pending"

COMPLIANCE_STATUSES: tuple[str, ...] = (
    COMPLIANCE_STATUS_COMPLIANT,
    COMPLIANCE_STATUS_NON_COMPLIANT,
    COMPLIANCE_STATUS_PENDING,
)


@dataclass
class Product:
    """Label declarations of a product listed on an e-commerce platform."""

    id: str | None
    name: str
    manufacturer: str | None = None
    description: str | None = None
    image_url: str | None = None
    mrp: Decimal | None = None
    net_quantity: str | None = None
    country_of_origin: str | None = None
    date_of_manufacture: date | None = None
    consumer_care_details: str | None = None
    platform: str | None = None
    platform_product_id: str | None = None
    compliance_status: str = COMPLIANCE_STATUS_PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "COMPLIANCE_STATUSES",
    "COMPLIANCE_STATUS_COMPLIANT",
    "COMPLIANCE_STATUS_NON_COMPLIANT",
    "COMPLIANCE_STATUS_PENDING",
    "Product",
]
