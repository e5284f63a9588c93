"""
Shared pytest fixtures for the User API test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes and fixture dependencies
- Test data factories
- Per-test application instances for state isolation
- Test client creation
"""

import os
import pytest
from typing import Any
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app
from app.models import User
from app.repository import UserRepository
from app.service import UserService


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def app():
    """
    Create application instance for a single test.

    The repository lives inside the app instance, so a fresh app per
    test gives every test the two seeded users and nothing else.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def app_repository(app) -> UserRepository:
    """Return the repository wired into the test app."""
    return app.extensions["users"]["repository"]


@pytest.fixture
def repository() -> UserRepository:
    """Provide a standalone repository with the default seed."""
    return UserRepository()


@pytest.fixture
def service(repository) -> UserService:
    """Provide a service backed by the standalone repository."""
    return UserService(repository)


@pytest.fixture
def api_headers() -> dict[str, str]:
    """Standard headers for JSON API requests."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def user_payload_factory():
    """
    Factory fixture for building POST /users request bodies.

    Example:
        def test_something(user_payload_factory):
            payload = user_payload_factory(name="Alice")
    """

    def _build(name: str | None = None, email: str | None = None) -> dict[str, Any]:
        return {
            "name": fake.name() if name is None else name,
            "email": fake.unique.email() if email is None else email,
        }

    return _build


@pytest.fixture
def user_factory(user_payload_factory):
    """Factory fixture for unsaved User instances with random data."""

    def _build(**overrides: Any) -> User:
        payload = user_payload_factory(**overrides)
        return User(name=payload["name"], email=payload["email"])

    return _build
