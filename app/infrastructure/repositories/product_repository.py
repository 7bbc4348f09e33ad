"""Persistence layer for products."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.domain.entities import Product
from app.domain.rules import NotFound
from app.infrastructure.models import ProductModel

from .errors import storage_errors

_PRODUCT_FIELDS: tuple[str, ...] = (
    "name",
    "manufacturer",
    "description",
    "image_url",
    "mrp",
    "net_quantity",
    "country_of_origin",
    "date_of_manufacture",
    "consumer_care_details",
    "platform",
    "platform_product_id",
    "compliance_status",
)


class ProductRepository:
    """Read products and record their compliance status."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        search: str | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> Sequence[Product]:
        with storage_errors(self.session, "listing products"):
            query = self.session.query(ProductModel)
            if search:
                pattern = f"%{search.strip().lower()}%"
                query = query.filter(
                    or_(
                        func.lower(ProductModel.name).like(pattern),
                        func.lower(ProductModel.manufacturer).like(pattern),
                    )
                )
            if status is not None:
                query = query.filter(ProductModel.compliance_status == status)
            query = query.order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return [self._to_entity(model) for model in query.all()]

    def get(self, product_id: str) -> Product | None:
        with storage_errors(self.session, "loading a product"):
            model = self.session.get(ProductModel, product_id)
            return self._to_entity(model) if model else None

    def create(self, product: Product) -> Product:
        with storage_errors(self.session, "creating a product"):
            model = ProductModel()
            if product.id is not None:
                model.id = product.id
            for field_name in _PRODUCT_FIELDS:
                setattr(model, field_name, getattr(product, field_name))
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
            return self._to_entity(model)

    def update_status(self, product_id: str, status: str, *, commit: bool = True) -> Product:
        with storage_errors(self.session, "updating a product status"):
            model = self.session.get(ProductModel, product_id)
            if model is None:
                raise NotFound(f"Product {product_id} not found")
            model.compliance_status = status
            self.session.add(model)
            if commit:
                self.session.commit()
            else:
                self.session.flush()
            self.session.refresh(model)
            return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{field_name: getattr(model, field_name) for field_name in _PRODUCT_FIELDS},
        )


__all__ = ["ProductRepository"]
