from contextlib import asynccontextmanager
from unittest.mock import patch

import httpx
import pytest
from httpx import ASGITransport
from mongomock_motor import AsyncMongoMockClient

from app.config import Settings


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MONGO_URI", "mongodb://test")
    monkeypatch.setenv("MONGO_DB", "southend-test")
    monkeypatch.setenv("ADMIN_EMAIL", "admin@southend.test")
    monkeypatch.setenv("EMAIL_PASS", "test-pass")
    monkeypatch.setenv("POPUP_FILE", str(tmp_path / "popup.json"))


@pytest.fixture
def smtp_mock():
    with patch("app.services.mail.smtplib.SMTP") as smtp_cls:
        yield smtp_cls


@pytest.fixture
def smtp_server(smtp_mock):
    """The server object yielded by ``with smtplib.SMTP(...) as server``."""
    return smtp_mock.return_value.__enter__.return_value


@pytest.fixture
def mongo():
    return AsyncMongoMockClient()["southend-test"]


@pytest.fixture
def app_client(mock_env, smtp_mock):
    """Start the app with settings read from the current environment."""
    from app.main import app, lifespan

    @asynccontextmanager
    async def _start():
        with (
            patch("app.main.settings", Settings()),
            patch("app.main.AsyncIOMotorClient", AsyncMongoMockClient),
        ):
            async with lifespan(app):
                async with httpx.AsyncClient(
                    transport=ASGITransport(app=app),
                    base_url="http://test",
                ) as c:
                    yield c

    return _start


@pytest.fixture
async def client(app_client):
    async with app_client() as c:
        yield c
