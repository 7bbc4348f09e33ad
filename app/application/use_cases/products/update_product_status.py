"""Use case for recording a product's compliance status."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.infrastructure.repositories import ProductRepository
from .validators import ensure_compliance_status

logger = logging.getLogger(__name__)


def update_product_status(session: Session, *, product_id: str, status: str) -> Product:
    """Set the compliance status of ``product_id``."""

    status = ensure_compliance_status(status)
    product = ProductRepository(session).update_status(product_id, status)
    logger.info("Product %s marked %s", product_id, status)
    return product
