"""Use case for the product compliance dashboard listing."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.infrastructure.repositories import ProductRepository
from .validators import ensure_compliance_status


def list_products(
    session: Session,
    *,
    search: str | None = None,
    status: str | None = None,
    skip: int = 0,
    limit: int | None = 100,
) -> Sequence[Product]:
    """Return products, newest first.

    ``search`` matches name or manufacturer case-insensitively; ``status``
    keeps only products in that compliance status.
    """

    if status is not None:
        status = ensure_compliance_status(status)
    search = search.strip() if search else None
    return ProductRepository(session).list(
        search=search or None, status=status, skip=skip, limit=limit
    )
