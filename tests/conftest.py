"""Shared fixtures: a throwaway SQLite database and signed access tokens."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "compliance_api_test.db"
TEST_JWT_SECRET = "test-secret"
TEST_AUDIENCE = "authenticated"

os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ["JWT_AUDIENCE"] = TEST_AUDIENCE
os.environ["ADMIN_ROLE"] = "admin"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()


@pytest.fixture()
def reset_database():
    """Recreate every table so each test starts from an empty database."""

    from app.infrastructure.database import Base, engine, initialize_database

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(reset_database):
    from app.infrastructure.database import SessionLocal

    with SessionLocal() as session:
        yield session


@pytest.fixture()
def client(reset_database):
    pytest.importorskip("fastapi")
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_custom_evaluators():
    from app.domain.rules import custom_evaluators

    custom_evaluators.clear()
    yield
    custom_evaluators.clear()


def make_token(
    subject: str,
    *,
    role: str | None = None,
    audience: str = TEST_AUDIENCE,
    secret: str = TEST_JWT_SECRET,
    expires_in: timedelta = timedelta(minutes=30),
) -> str:
    """Sign a token shaped like the ones the identity provider issues."""

    from jose import jwt

    claims = {
        "sub": subject,
        "email": f"{subject}@example.com",
        "aud": audience,
        "exp": datetime.now(tz=timezone.utc) + expires_in,
        "role": "authenticated",
    }
    if role is not None:
        claims["app_metadata"] = {"role": role}
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token('admin-1', role='admin')}"}


@pytest.fixture()
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token('reviewer-1')}"}


@pytest.fixture()
def token_factory():
    return make_token
