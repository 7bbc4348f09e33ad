from .product import (
    ProductEvaluationRead,
    ProductRead,
    ProductStatusUpdate,
    ViolationRead,
)
from .report import ReportCreate, ReportRead, ReportStatusUpdate
from .rule import (
    RuleCreate,
    RuleRead,
    RuleStatusUpdate,
    RuleUpdate,
    RuleValuePreview,
    RuleValuePreviewRequest,
)

__all__ = [
    "ProductEvaluationRead",
    "ProductRead",
    "ProductStatusUpdate",
    "ReportCreate",
    "ReportRead",
    "ReportStatusUpdate",
    "RuleCreate",
    "RuleRead",
    "RuleStatusUpdate",
    "RuleUpdate",
    "RuleValuePreview",
    "RuleValuePreviewRequest",
    "ViolationRead",
]
