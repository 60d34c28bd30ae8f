import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from security_service.dependencies import (
    get_messaging_provider,
    get_otp_repository,
    get_password_repository,
)
from security_service.models.records import OtpRecord, PasswordRecord
from security_service.storage.repository import InMemoryRepository


@pytest.fixture
def otp_repository():
    return InMemoryRepository(OtpRecord, "token")


@pytest.fixture
def password_repository():
    return InMemoryRepository(PasswordRecord, "id")


@pytest.fixture
def messaging():
    """Mock messaging service; every channel resolves to it."""
    service = MagicMock()
    service.send.return_value = True
    return service


@pytest.fixture
def messaging_provider(messaging):
    provider = MagicMock()
    provider.get.return_value = messaging
    return provider


@pytest.fixture
def client(otp_repository, password_repository, messaging_provider):
    """Create test client with in-memory storage and mocked messaging."""
    from security_service.main import app

    app.dependency_overrides[get_otp_repository] = lambda: otp_repository
    app.dependency_overrides[get_password_repository] = lambda: password_repository
    app.dependency_overrides[get_messaging_provider] = lambda: messaging_provider
    yield TestClient(app)
    app.dependency_overrides.clear()
