"""Schemas for violation report endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReportCreate(BaseModel):
    violation_details: str = Field(..., min_length=1)
    violation_type: str | None = None
    license_number: str | None = None
    severity: str = "medium"


class ReportStatusUpdate(BaseModel):
    status: str


class ReportRead(BaseModel):
    id: str
    product_id: str
    reporter_id: str | None
    license_number: str | None
    violation_details: str
    violation_type: str | None
    severity: str
    status: str
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
