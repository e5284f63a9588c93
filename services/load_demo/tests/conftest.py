"""
Shared pytest fixtures for load demo tests.

Provides the Flask application configured for testing (a token CPU
workload) and a per-test client.
"""

from __future__ import annotations

import os

import pytest

os.environ["FLASK_ENV"] = "testing"

from services.load_demo.load_demo_app import create_app


@pytest.fixture(scope="session")
def app():
    """Provide the load demo app for the entire test session."""
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """Provide a Flask test client scoped to a single test function."""
    with app.test_client() as test_client:
        yield test_client
