"""Aggregate application use cases."""

from .products import evaluate_product
from .reports import create_report
from .rules import create_rule

__all__ = [
    "create_report",
    "create_rule",
    "evaluate_product",
]
