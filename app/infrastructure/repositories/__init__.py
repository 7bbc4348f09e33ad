"""Repository implementations for infrastructure layer."""

from .product_repository import ProductRepository
from .report_repository import ReportRepository
from .rule_repository import RuleRepository

__all__ = [
    "ProductRepository",
    "ReportRepository",
    "RuleRepository",
]
