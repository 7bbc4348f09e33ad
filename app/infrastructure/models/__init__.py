"""ORM models used by the application infrastructure."""

from .product import ProductModel
from .report import ReportModel
from .rule import RuleModel

__all__ = [
    "ProductModel",
    "ReportModel",
    "RuleModel",
]
