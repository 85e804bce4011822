"""Pytest fixtures: app construido con settings fijos y una clave de firma conocida."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.models.badge import Badge
from app.security import IntegrityGuard

TEST_SECRET = "test-secret-key-for-guild-badges-0123456789"
TEST_FLAG = "FLAG{test-master-console}"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        realm_name="Svartalfheim",
        port=8080,
        flag=TEST_FLAG,
        secret_key=TEST_SECRET,
    )


@pytest.fixture
def guard(settings) -> IntegrityGuard:
    return IntegrityGuard(settings.secret_key)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_badge() -> Badge:
    return Badge(
        guild_name="Master Forgers",
        rank="Forgemaster",
        level=99,
        message="Member of Master Forgers",
        is_admin=True,
    )


@pytest.fixture
def admin_token(guard, admin_badge) -> str:
    """Emisión de confianza, equivalente a scripts/issue_badge.py --admin."""
    return guard.issue_token(admin_badge).serialize()
