"""Tests for access token verification and principal resolution."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.infrastructure.security import decode_access_token, user_from_claims


def test_decode_access_token_returns_claims(token_factory) -> None:
    claims = decode_access_token(token_factory("user-7", role="admin"))

    assert claims["sub"] == "user-7"
    assert claims["app_metadata"] == {"role": "admin"}


def test_expired_tokens_are_rejected(token_factory) -> None:
    token = token_factory("user-7", expires_in=timedelta(minutes=-5))

    with pytest.raises(ValueError):
        decode_access_token(token)


def test_role_is_read_from_app_metadata_first() -> None:
    user = user_from_claims(
        {"sub": "u-1", "email": "u@example.com", "role": "authenticated", "app_metadata": {"role": "Admin"}}
    )

    assert user.role == "Admin"
    assert user.is_admin() is True


def test_top_level_role_is_used_as_fallback() -> None:
    user = user_from_claims({"sub": "u-2", "role": "authenticated"})

    assert user.email is None
    assert user.role == "authenticated"
    assert user.is_admin() is False


def test_claims_without_subject_are_rejected() -> None:
    with pytest.raises(ValueError):
        user_from_claims({"email": "u@example.com"})
