"""Schemas for product endpoints."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class ProductRead(BaseModel):
    id: str
    name: str
    manufacturer: str | None
    description: str | None
    image_url: str | None
    mrp: Decimal | None
    net_quantity: str | None
    country_of_origin: str | None
    date_of_manufacture: date | None
    consumer_care_details: str | None
    platform: str | None
    platform_product_id: str | None
    compliance_status: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ProductStatusUpdate(BaseModel):
    compliance_status: str


class ViolationRead(BaseModel):
    field: str
    rule_name: str
    message: str
    severity: str

    model_config = ConfigDict(from_attributes=True)


class ProductEvaluationRead(BaseModel):
    """Violations found for a product and the rules skipped as corrupt."""

    product_id: str
    compliant: bool
    violations: list[ViolationRead]
    skipped: list[str | None]
    compliance_status: str
    status_applied: bool
