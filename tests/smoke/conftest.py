"""
Smoke-test fixtures for a running User API.

Provides the ``smoke_base_url`` session-scoped fixture. The URL comes
from ``TEST_BASE_URL`` (default ``http://localhost:3000``); when nothing
answers there the whole smoke suite is skipped rather than failed.
"""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest
import requests


@pytest.fixture(scope="session")
def smoke_base_url() -> Generator[str, None, None]:
    """Yield the base URL of a live User API, skipping if it is down."""
    base_url = os.getenv("TEST_BASE_URL", "http://localhost:3000").rstrip("/")
    try:
        requests.get(f"{base_url}/users", timeout=2)
    except requests.RequestException as exc:
        pytest.skip(f"No live User API at {base_url}: {exc}")
    yield base_url
