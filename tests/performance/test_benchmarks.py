#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Performance benchmarks for hashing, login and session validation
#
import logging

import pytest

from auth.passwords import DEFAULT_SALT_BYTES, generate_salt, hash_password

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.performance


class TestHashingPerformance:
    """Benchmark credential hashing."""

    def test_hash_password_default_salt(self, benchmark):
        salt = generate_salt(DEFAULT_SALT_BYTES)

        result = benchmark(hash_password, "correct horse battery staple", salt)

        assert len(result) == 64
        logger.info("✓ hash_password benchmark completed")

    def test_generate_salt(self, benchmark):
        result = benchmark(generate_salt, DEFAULT_SALT_BYTES)
        assert len(result) == DEFAULT_SALT_BYTES * 2


class TestApiPerformance:
    """Benchmark the HTTP round trip through the in-process app."""

    def test_login_performance(self, api_client, john, benchmark):
        body = {"email": john["email"], "password": john["password"]}

        result = benchmark(api_client.post, "/api/user/login", json=body)

        assert result.status_code == 200
        logger.info("✓ Login benchmark completed")

    def test_session_validation_performance(self, api_client, john_session, benchmark):
        result = benchmark(api_client.get, "/api/user/me", headers={"session-id": john_session})

        assert result.status_code == 200
        logger.info("✓ Session validation benchmark completed")
