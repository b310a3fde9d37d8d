"""Pytest configuration for recruit CRM tests."""

import os
from typing import Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Configure Hypothesis before importing test modules
from tests.property_based.config import PropertyTestConfig
PropertyTestConfig.configure_hypothesis()

from recruit_crm.auth.utils import create_access_token
from recruit_crm.auth.verifier import JWTTokenVerifier
from recruit_crm.core.config import FIREBASE_CREDENTIAL_VARS, Settings
from recruit_crm.main import create_app
from recruit_crm.store.memory import InMemoryDocumentStore

TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture
def test_settings(monkeypatch) -> Settings:
    """Settings for an isolated app: in-memory store, HS256 tokens, no .env."""
    for name in FIREBASE_CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
    return Settings(
        _env_file=None,
        store_backend="memory",
        auth_provider="jwt",
        secret_key=TEST_SECRET_KEY,
        environment="testing",
        log_level="WARNING",
    )


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Provide an empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def app(test_settings, store):
    return create_app(
        settings=test_settings,
        store=store,
        token_verifier=JWTTokenVerifier(TEST_SECRET_KEY, test_settings.algorithm),
    )


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(test_settings) -> Callable[..., Dict[str, str]]:
    """Build Authorization headers for a tenant."""
    def _auth_headers(tenant_id: str = "u1") -> Dict[str, str]:
        token = create_access_token({"sub": tenant_id}, settings=test_settings)
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers


# Pytest markers for organizing tests
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "property_test: mark test as a property-based test"
    )
    config.addinivalue_line(
        "markers", "database: mark test as requiring database access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "property_based" in str(item.fspath):
            item.add_marker(pytest.mark.property_test)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Automatically setup test environment for all tests."""
    os.environ["TESTING"] = "1"
    yield
