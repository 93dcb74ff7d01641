#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Pytest configuration and shared fixtures.
#
"""
Pytest Configuration and Shared Fixtures for the SessionAuth Test Suite.

This module provides:
- Test configuration (in-memory store, small salts)
- AuthService and store fixtures
- API client setup
- A controllable clock for expiry and rate limit tests
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from auth.rate_limiter import LoginRateLimiter
from auth.service import AuthService
from repositories.memory_store import InMemoryAuthStore
from tests.data.factories import SignupPayloadFactory

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

TEST_SALT_BYTES = 32
TEST_MAX_ATTEMPTS = 3


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


# ============================================================================
# CONFIGURATION
# ============================================================================

@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Configuration dict as it would be loaded from cfg/config.yaml."""
    return {
        'database': {
            'host': '127.0.0.1',
            'port': 3306,
            'name': 'sessionauth_test',
            'user': 'sessionauth',
            'password': '',
        },
        'auth': {
            'store': 'memory',
            'salt_bytes': TEST_SALT_BYTES,
            'session_ttl_seconds': 0,
            'session_header': 'session-id',
            'rate_limit': {
                'enabled': True,
                'max_attempts': TEST_MAX_ATTEMPTS,
                'window_minutes': 15,
            },
        },
        'api': {'cors_origins': []},
    }


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryAuthStore:
    return InMemoryAuthStore()


@pytest.fixture
def rate_limiter(clock) -> LoginRateLimiter:
    return LoginRateLimiter(max_attempts=TEST_MAX_ATTEMPTS, window_minutes=15, clock=clock)


@pytest.fixture
def auth_service(store, clock) -> AuthService:
    """AuthService without rate limiting."""
    return AuthService(store, salt_bytes=TEST_SALT_BYTES, clock=clock)


@pytest.fixture
def limited_auth_service(store, clock, rate_limiter) -> AuthService:
    return AuthService(store, salt_bytes=TEST_SALT_BYTES, rate_limiter=rate_limiter, clock=clock)


@pytest.fixture
def signup_payload() -> Dict[str, str]:
    return SignupPayloadFactory()


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client(test_config, limited_auth_service):
    """
    HTTP client for API testing against the in-process app.

    The context manager runs the lifespan, which attaches the auth service.
    """
    app = create_app(config=test_config, auth_service=limited_auth_service)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def john(api_client) -> Dict[str, Any]:
    """Registers John and returns his credentials plus user id."""
    payload = {"name": "John", "email": "john@x.com", "password": "secret123"}
    response = api_client.post("/api/user/signup", json=payload)
    assert response.status_code == 201, response.text
    return {**payload, "id": response.json()["userId"]}


@pytest.fixture
def john_session(api_client, john) -> str:
    response = api_client.post(
        "/api/user/login",
        json={"email": john["email"], "password": john["password"]}
    )
    assert response.status_code == 200, response.text
    return response.json()["sessionId"]
