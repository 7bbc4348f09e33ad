"""Use cases for products under compliance review."""

from .evaluate_product import ProductEvaluation, evaluate_product
from .get_product import get_product
from .list_products import list_products
from .update_product_status import update_product_status

__all__ = [
    "ProductEvaluation",
    "evaluate_product",
    "get_product",
    "list_products",
    "update_product_status",
]
