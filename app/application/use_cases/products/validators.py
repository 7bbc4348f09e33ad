"""Validation helpers for product use cases."""

from app.domain.entities import COMPLIANCE_STATUSES


def ensure_compliance_status(status: str) -> str:
    normalized = status.strip().lower() if isinstance(status, str) else status
    if normalized not in COMPLIANCE_STATUSES:
        allowed = ", ".join(COMPLIANCE_STATUSES)
        raise ValueError(f"Unsupported compliance status {status!r}; expected one of: {allowed}")
    return normalized


__all__ = ["ensure_compliance_status"]
