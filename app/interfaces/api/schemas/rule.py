"""Schemas for compliance rule endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RuleBase(BaseModel):
    name: str = Field(..., min_length=1, description="Human readable rule label")
    target_field: str = Field(..., description="Product attribute the rule inspects")
    kind: str = Field(..., description="presence, regex, list, range or custom")
    description: str | None = None


class RuleCreate(RuleBase):
    """Payload required to create a rule.

    Send either the structured ``value`` or the ``value_text`` typed in the
    rule form (``0-1000``, ``India, Nepal``...). Presence rules need neither.
    """

    value: Any = None
    value_text: str | None = None
    is_active: bool = True


class RuleUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    target_field: str | None = None
    kind: str | None = None
    value: Any = None
    value_text: str | None = None
    description: str | None = None
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")


class RuleStatusUpdate(BaseModel):
    is_active: bool


class RuleRead(RuleBase):
    id: str
    value: Any
    value_text: str | None = Field(
        default=None, description="Rule value as it would be typed in the rule form"
    )
    is_active: bool
    created_by: str | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class RuleValuePreviewRequest(BaseModel):
    kind: str
    value_text: str = ""


class RuleValuePreview(BaseModel):
    """Canonical value decoded from form text, and the text it encodes back to."""

    kind: str
    value: Any
    value_text: str
