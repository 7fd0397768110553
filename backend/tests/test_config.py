"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from jobs_api.config import Settings


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./jobs.db")
    assert Settings().database_url == "sqlite:///./jobs.db"


def test_database_url_from_mysql_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("MYSQL_HOST", "db")
    monkeypatch.setenv("MYSQL_PASSWORD", "pw")
    assert Settings().database_url == (
        "mysql+pymysql://jobs_api:pw@db:3306/jobs_api?charset=utf8mb4"
    )


def test_weak_secret_rejected_outside_development():
    with pytest.raises(ValidationError):
        Settings(environment="production", secret_key="changeme")


def test_strong_secret_accepted_in_production():
    settings = Settings(environment="production", secret_key="a" * 64)
    assert settings.jwt_expire_hours == 720
