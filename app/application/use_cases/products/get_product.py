"""Use case for retrieving a single product."""

from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.domain.rules import NotFound
from app.infrastructure.repositories import ProductRepository


def get_product(session: Session, product_id: str) -> Product:
    """Return the requested product or raise ``NotFound``."""

    product = ProductRepository(session).get(product_id)
    if product is None:
        raise NotFound(f"Product {product_id} not found")
    return product
