"""Verification of access tokens issued by the external identity provider."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jose import JWTError, jwt

from app.config import get_settings
from app.domain.entities import User


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify ``token`` and return its claims."""

    settings = get_settings()
    options = {"verify_aud": settings.jwt_audience is not None}
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options,
        )
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def user_from_claims(claims: Mapping[str, Any]) -> User:
    """Build the principal described by verified token claims.

    The role is read from ``app_metadata.role`` when present, as hosted auth
    providers put custom roles there, and from the top-level ``role`` claim
    otherwise.
    """

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise ValueError("Token does not identify a user")

    role = None
    app_metadata = claims.get("app_metadata")
    if isinstance(app_metadata, Mapping):
        role = app_metadata.get("role")
    if not isinstance(role, str):
        role = claims.get("role") if isinstance(claims.get("role"), str) else None

    email = claims.get("email")
    return User(
        id=subject.strip(),
        email=email if isinstance(email, str) else None,
        role=role,
        admin_role=get_settings().admin_role,
    )


__all__ = ["decode_access_token", "user_from_claims"]
