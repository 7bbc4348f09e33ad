"""Domain entities exposed by the application."""

from .product import (
    COMPLIANCE_STATUSES,
    COMPLIANCE_STATUS_COMPLIANT,
    COMPLIANCE_STATUS_NON_COMPLIANT,
    COMPLIANCE_STATUS_PENDING,
    Product,
)
from .report import (
    REPORT_STATUSES,
    REPORT_STATUS_OPEN,
    SEVERITIES,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
    VIOLATION_TYPES,
    Report,
)
from .rule import (
    NUMERIC_TARGET_FIELDS,
    RULE_KINDS,
    RULE_KIND_CUSTOM,
    RULE_KIND_LIST,
    RULE_KIND_PRESENCE,
    RULE_KIND_RANGE,
    RULE_KIND_REGEX,
    TARGET_FIELDS,
    Rule,
)
from .user import User
from .violation import EvaluationResult, Violation

__all__ = [
    "COMPLIANCE_STATUSES",
    "COMPLIANCE_STATUS_COMPLIANT",
    "COMPLIANCE_STATUS_NON_COMPLIANT",
    "COMPLIANCE_STATUS_PENDING",
    "EvaluationResult",
    "NUMERIC_TARGET_FIELDS",
    "Product",
    "REPORT_STATUSES",
    "REPORT_STATUS_OPEN",
    "RULE_KINDS",
    "RULE_KIND_CUSTOM",
    "RULE_KIND_LIST",
    "RULE_KIND_PRESENCE",
    "RULE_KIND_RANGE",
    "RULE_KIND_REGEX",
    "Report",
    "Rule",
    "SEVERITIES",
    "SEVERITY_HIGH",
    "SEVERITY_MEDIUM",
    "TARGET_FIELDS",
    "User",
    "VIOLATION_TYPES",
    "Violation",
]
