"""SQLAlchemy model for products under compliance review."""

from uuid import uuid4

from sqlalchemy import Column, Date, DateTime, Numeric, String, Text

from app.domain.entities import COMPLIANCE_STATUS_PENDING
from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class ProductModel(Base):
    """Database representation of a product listing."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(Text, nullable=False)
    manufacturer = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    mrp = Column(Numeric(10, 2), nullable=True)
    net_quantity = Column(Text, nullable=True)
    country_of_origin = Column(Text, nullable=True)
    date_of_manufacture = Column(Date, nullable=True)
    consumer_care_details = Column(Text, nullable=True)
    platform = Column(Text, nullable=True)
    platform_product_id = Column(Text, nullable=True)
    compliance_status = Column(
        String(20),
        nullable=False,
        default=COMPLIANCE_STATUS_PENDING,
        server_default=COMPLIANCE_STATUS_PENDING,
        index=True,
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


__all__ = ["ProductModel"]
