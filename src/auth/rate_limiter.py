#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Rate limiting for login attempts.
#
"""
Rate limiting for login attempts.
"""

import math
import threading
from collections import defaultdict
from datetime import datetime, timedelta
from typing import Callable, Dict, List

from auth.errors import TooManyAttemptsError


class LoginRateLimiter:
    """
    Brute-force protection for login.

    Limits failed login attempts per normalized email within a sliding time window.
    State is per process.
    """

    def __init__(self, max_attempts: int = 5, window_minutes: int = 15,
                 clock: Callable[[], datetime] = datetime.now):
        """
        Args:
            max_attempts: Maximum failed attempts within the time window
            window_minutes: Time window in minutes
            clock: Time source (overridable in tests)
        """
        self.attempts: Dict[str, List[datetime]] = defaultdict(list)
        self.max_attempts = max_attempts
        self.window = timedelta(minutes=window_minutes)
        self._clock = clock
        self._lock = threading.Lock()

    def _recent(self, key: str, now: datetime) -> List[datetime]:
        return [ts for ts in self.attempts.get(key, []) if now - ts < self.window]

    def is_allowed(self, key: str) -> bool:
        """Returns True while the key has attempts left in the current window."""
        now = self._clock()
        with self._lock:
            recent = self._recent(key, now)
            if recent:
                self.attempts[key] = recent
            else:
                self.attempts.pop(key, None)
            return len(recent) < self.max_attempts

    def ensure_allowed(self, key: str) -> None:
        """
        Raises:
            TooManyAttemptsError: If the key is locked out
        """
        if not self.is_allowed(key):
            raise TooManyAttemptsError(retry_after=self.get_retry_after(key))

    def record_attempt(self, key: str) -> None:
        """Records a failed login attempt and drops keys whose window has passed."""
        now = self._clock()
        with self._lock:
            self._sweep(now)
            self.attempts[key].append(now)

    def _sweep(self, now: datetime) -> None:
        # Timestamps are appended in order; the last one is the newest
        expired = [key for key, stamps in self.attempts.items() if not stamps or now - stamps[-1] >= self.window]
        for key in expired:
            del self.attempts[key]

    def reset(self, key: str) -> None:
        """Forgets all attempts for a key (after successful login)."""
        with self._lock:
            self.attempts.pop(key, None)

    def get_retry_after(self, key: str) -> int:
        """
        Returns seconds until the next allowed attempt (0 if allowed).
        """
        now = self._clock()
        with self._lock:
            recent = self._recent(key, now)
            if len(recent) < self.max_attempts:
                return 0
            # Oldest attempt + window = unlock time
            unlock_time = min(recent) + self.window
            return max(1, math.ceil((unlock_time - now).total_seconds()))
