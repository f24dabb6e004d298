"""
pytest Fixtures for Bookstore API Tests

This file contains shared fixtures used across all test files.

Every test gets a brand new application from create_app(), and with it
empty credential and review stores. Nothing leaks between tests.

Service-level tests use the catalog/credentials/ledger/sessions fixtures
directly; HTTP tests go through the `client` fixture.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# This sets a test secret key and the cheapest bcrypt cost factor
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["BCRYPT_ROUNDS"] = "4"

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookstore.config import Settings, get_settings
from bookstore.main import create_app
from bookstore.models import User
from bookstore.services import (
    BookCatalog,
    CredentialStore,
    PasswordHasher,
    ReviewLedger,
    SessionIssuer,
)

KNOWN_ISBN = "9780123456789"
OTHER_ISBN = "9780987654321"


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings built from the test environment."""
    return get_settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh application with empty stores."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client for the isolated app.

    The test client makes HTTP requests to the FastAPI app without
    running a server. Using it as a context manager runs the lifespan.
    """
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def catalog() -> BookCatalog:
    return BookCatalog()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def credentials(hasher: PasswordHasher) -> CredentialStore:
    return CredentialStore(hasher)


@pytest.fixture
def ledger(catalog: BookCatalog) -> ReviewLedger:
    return ReviewLedger(catalog)


@pytest.fixture
def sessions(settings: Settings) -> SessionIssuer:
    return SessionIssuer(settings.secret_key)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


def register_and_login(client: TestClient, username: str, email: str, password: str) -> dict:
    """Register a user over HTTP and return the login response body."""
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    response = client.post(
        "/api/auth/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> dict:
    """Create an authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client: TestClient) -> dict:
    """Registered and logged-in user "alice"."""
    return register_and_login(client, "alice", "a@x.com", "pw1")


@pytest.fixture
def bob(client: TestClient) -> dict:
    """A second user for ownership scenarios."""
    return register_and_login(client, "bob", "b@x.com", "pw2")


@pytest.fixture
def alice_headers(alice: dict) -> dict:
    return bearer(alice["token"])


@pytest.fixture
def bob_headers(bob: dict) -> dict:
    return bearer(bob["token"])


@pytest.fixture
def sample_user(credentials: CredentialStore) -> User:
    """A user registered directly in the credentials fixture."""
    return credentials.register("testuser", "testuser@example.com", "SecurePass123")
