#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Error response tests: malformed input, store failures, service state
#
import logging

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from auth.errors import StoreError

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.api


class TestMalformedRequests:
    """Malformed bodies map to 400 with an error message."""

    def test_invalid_json(self, api_client):
        response = api_client.post(
            "/api/user/signup",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_wrong_field_type(self, api_client):
        response = api_client.post("/api/user/login", json={"email": ["a@x.com"], "password": "pw"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_unknown_route(self, api_client):
        response = api_client.get("/api/user/unknown")

        assert response.status_code == 404
        assert "error" in response.json()


class TestStoreFailures:
    """Store errors become a generic 500 without internal detail."""

    @pytest.fixture
    def broken_store(self, store, monkeypatch):
        def fail(*args, **kwargs):
            raise StoreError("Database connection error (fetch user by email): 2003 Can't connect")

        monkeypatch.setattr(store, "find_credential_by_email", fail)
        return store

    @pytest.mark.parametrize("url,body", [
        ("/api/user/signup", {"name": "John", "email": "john@x.com", "password": "pw"}),
        ("/api/user/login", {"email": "john@x.com", "password": "pw"}),
    ])
    def test_store_error_is_500(self, api_client, broken_store, url, body):
        response = api_client.post(url, json=body)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "2003" not in response.text
        logger.info("✓ Store error on %s hidden behind 500", url)

    def test_unexpected_error_is_500(self, api_client, store, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(store, "find_session", explode)

        response = api_client.get("/api/user/me", headers={"session-id": "3f1c2a9e-8d4b-4f6a-9c1e-2b7d5e8f0a13"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestServiceState:

    def test_health(self, api_client):
        response = api_client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "SessionAuth API", "version": "1.0.0"}

    def test_not_initialized_without_lifespan(self, test_config, auth_service):
        """Without startup the auth context is missing and requests get 503."""
        client = TestClient(create_app(config=test_config, auth_service=auth_service))

        response = client.post("/api/user/login", json={"email": "john@x.com", "password": "pw"})

        assert response.status_code == 503
        assert response.json() == {"error": "Authentication service not initialized"}
