"""SQLAlchemy model for compliance rules."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import expression
from sqlalchemy.types import JSON

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone

_rule_json_type = JSONB().with_variant(JSON(), "sqlite")


class RuleModel(Base):
    """Database representation of compliance rules."""

    __tablename__ = "rules"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    rule_name = Column(Text, nullable=False)
    field_to_validate = Column(Text, nullable=False, index=True)
    rule_type = Column(Text, nullable=False)
    rule_value = Column(_rule_json_type, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    created_by = Column(String(36), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=True,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["RuleModel"]
