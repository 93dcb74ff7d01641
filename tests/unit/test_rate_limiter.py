#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Unit tests for the login rate limiter
#
import pytest

from auth.errors import TooManyAttemptsError
from auth.rate_limiter import LoginRateLimiter

pytestmark = pytest.mark.unit


@pytest.fixture
def limiter(clock):
    return LoginRateLimiter(max_attempts=3, window_minutes=15, clock=clock)


class TestLoginRateLimiter:

    def test_allowed_initially(self, limiter):
        assert limiter.is_allowed("john@x.com")
        assert limiter.get_retry_after("john@x.com") == 0

    def test_blocks_after_max_attempts(self, limiter):
        for _ in range(3):
            limiter.record_attempt("john@x.com")
        assert not limiter.is_allowed("john@x.com")
        assert len(limiter.attempts["john@x.com"]) == 3

    def test_keys_are_independent(self, limiter):
        for _ in range(3):
            limiter.record_attempt("john@x.com")
        assert limiter.is_allowed("jane@x.com")

    def test_retry_after_counts_down(self, limiter, clock):
        for _ in range(3):
            limiter.record_attempt("john@x.com")
        assert limiter.get_retry_after("john@x.com") == 900
        clock.advance(600)
        assert limiter.get_retry_after("john@x.com") == 300

    def test_window_expiry_unblocks(self, limiter, clock):
        for _ in range(3):
            limiter.record_attempt("john@x.com")
        clock.advance(15 * 60)
        assert limiter.is_allowed("john@x.com")
        assert "john@x.com" not in limiter.attempts

    def test_reset(self, limiter):
        for _ in range(3):
            limiter.record_attempt("john@x.com")
        limiter.reset("john@x.com")
        assert limiter.is_allowed("john@x.com")

    def test_ensure_allowed_raises_with_retry_after(self, limiter):
        limiter.ensure_allowed("john@x.com")
        for _ in range(3):
            limiter.record_attempt("john@x.com")
        with pytest.raises(TooManyAttemptsError) as exc_info:
            limiter.ensure_allowed("john@x.com")
        assert exc_info.value.retry_after == 900
        assert exc_info.value.status_code == 429

    def test_expired_keys_are_swept(self, limiter, clock):
        """Emails that stopped failing do not accumulate."""
        for n in range(500):
            limiter.record_attempt(f"user{n}@example.com")
        assert len(limiter.attempts) == 500

        clock.advance(15 * 60)
        limiter.record_attempt("john@x.com")

        assert list(limiter.attempts) == ["john@x.com"]

    def test_sweep_keeps_keys_inside_window(self, limiter, clock):
        limiter.record_attempt("jane@x.com")
        clock.advance(10 * 60)
        limiter.record_attempt("jane@x.com")
        clock.advance(10 * 60)
        limiter.record_attempt("john@x.com")

        assert set(limiter.attempts) == {"jane@x.com", "john@x.com"}
        assert len(limiter.attempts["jane@x.com"]) == 2
