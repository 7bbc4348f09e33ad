"""Tests for settings parsing and timezone helpers."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from app.config import Settings
from app.utils.datetime import _resolve_timezone, now_in_app_timezone


def _settings(**overrides) -> Settings:
    values = {"database_url": "sqlite://", "jwt_secret": "s"}
    values.update(overrides)
    return Settings(**values)


def test_defaults() -> None:
    settings = _settings()

    assert settings.jwt_algorithm == "HS256"
    assert settings.admin_role == "admin"
    assert settings.app_timezone == "Asia/Kolkata"


def test_blank_audience_disables_the_check() -> None:
    assert _settings(jwt_audience="  ").jwt_audience is None


def test_log_level_is_normalised() -> None:
    assert _settings(log_level=" debug ").log_level == "DEBUG"


def test_allowed_origins_are_split_on_commas() -> None:
    settings = _settings(cors_origins="http://a.test, http://b.test,,")

    assert settings.allowed_origins() == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC", timedelta(0)),
        ("UTC+05:30", timedelta(hours=5, minutes=30)),
        ("GMT-03:00", timedelta(hours=-3)),
    ],
)
def test_offset_timezones(name: str, offset: timedelta) -> None:
    tz = _resolve_timezone(name)

    assert tz.utcoffset(datetime(2024, 1, 1)) == offset


def test_unknown_zone_names_fall_back_to_kolkata() -> None:
    assert _resolve_timezone("Mars/Olympus") == _resolve_timezone("Asia/Kolkata")


def test_now_is_timezone_aware() -> None:
    assert now_in_app_timezone().tzinfo is not None
