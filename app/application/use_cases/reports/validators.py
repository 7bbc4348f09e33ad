"""Validation helpers for report use cases."""

from app.domain.entities import REPORT_STATUSES, SEVERITIES, VIOLATION_TYPES


def _ensure_choice(value: str, choices, label: str) -> str:
    normalized = value.strip().lower() if isinstance(value, str) else value
    if normalized not in choices:
        raise ValueError(f"Unsupported {label} {value!r}; expected one of: {', '.join(choices)}")
    return normalized


def ensure_severity(severity: str) -> str:
    return _ensure_choice(severity, SEVERITIES, "severity")


def ensure_report_status(status: str) -> str:
    return _ensure_choice(status, REPORT_STATUSES, "report status")


def ensure_violation_type(violation_type: str | None) -> str | None:
    if violation_type is None or not violation_type.strip():
        return None
    return _ensure_choice(violation_type, tuple(VIOLATION_TYPES), "violation type")


__all__ = ["ensure_report_status", "ensure_severity", "ensure_violation_type"]
