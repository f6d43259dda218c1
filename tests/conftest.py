"""
tests/conftest.py

Shared pytest fixtures used by both unit and integration test suites.
All HTTP fixtures use respx.mock — no real network calls are made in any test.
"""

from __future__ import annotations

import pytest
import respx

from cloudflare_ddns_helper.logger import reset_logging

# ---------------------------------------------------------------------------
# HTTP mock fixture — intercepts all httpx calls
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_http():
    """
    Yields a respx router that intercepts all httpx.AsyncClient calls.

    No real network traffic is allowed during tests. Use this fixture
    wherever a client would normally make an outbound request.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ---------------------------------------------------------------------------
# Logging — drop handlers installed by the CLI after each test
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_helper_logging():
    yield
    reset_logging()
