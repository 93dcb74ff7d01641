#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Registration, login and session validation.
#
"""
Registration, login and session validation.

AuthService holds no request state of its own; credentials and sessions
live in the injected AuthStore. The optional rate limiter is the only
in-process state.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from auth.errors import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    InvalidSessionError,
    UnauthenticatedError,
)
from auth.passwords import DEFAULT_SALT_BYTES, MIN_SALT_BYTES, generate_salt, hash_password, verify_password
from auth.rate_limiter import LoginRateLimiter
from auth.utils import is_session_id_format, normalize_email, require_fields
from domain.user import UserIdentity
from repositories.interfaces import AuthStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    # Naive UTC, matching MySQL DATETIME columns
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AuthService:
    """
    Credential & session manager.

    Args:
        store: Persistence for credentials and sessions
        salt_bytes: Random bytes per salt (at least 32)
        session_ttl_seconds: Session lifetime; 0 disables expiry
        rate_limiter: Optional brute-force protection for login
        clock: Time source returning naive UTC datetimes
    """

    def __init__(
        self,
        store: AuthStore,
        salt_bytes: int = DEFAULT_SALT_BYTES,
        session_ttl_seconds: int = 0,
        rate_limiter: Optional[LoginRateLimiter] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        if salt_bytes < MIN_SALT_BYTES:
            raise ValueError(f"salt_bytes must be at least {MIN_SALT_BYTES}")
        if session_ttl_seconds < 0:
            raise ValueError("session_ttl_seconds must not be negative")
        self.store = store
        self.salt_bytes = salt_bytes
        self.session_ttl = timedelta(seconds=session_ttl_seconds) if session_ttl_seconds else None
        self.rate_limiter = rate_limiter
        self._clock = clock
        # Salt for the unknown-email hash in authenticate()
        self._dummy_salt = generate_salt(salt_bytes)

    def register(self, name: Optional[str], email: Optional[str], password: Optional[str]) -> int:
        """
        Creates a credential.

        Returns:
            ID of the new credential

        Raises:
            ValidationError: Missing or blank field
            DuplicateIdentityError: Email already registered (also on a concurrent insert race)
            StoreError: Persistence failure
        """
        require_fields(name=name, email=email, password=password)
        email = normalize_email(email)
        name = name.strip()

        if self.store.find_credential_by_email(email) is not None:
            logger.info("Signup rejected: email already registered")
            raise DuplicateIdentityError()

        salt = generate_salt(self.salt_bytes)
        password_hash = hash_password(password, salt)
        user_id = self.store.create_credential(name, email, password_hash, salt)

        logger.info("User registered: id=%s", user_id)
        return user_id

    def authenticate(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Verifies credentials and opens a new session.

        Unknown email and wrong password raise the same error.

        Returns:
            Session ID (UUID string)

        Raises:
            ValidationError: Missing or blank field
            TooManyAttemptsError: Rate limit exhausted for this email
            InvalidCredentialsError: Unknown email or wrong password
            StoreError: Persistence failure
        """
        require_fields(email=email, password=password)
        email = normalize_email(email)

        if self.rate_limiter:
            self.rate_limiter.ensure_allowed(email)

        credential = self.store.find_credential_by_email(email)
        if credential is None:
            hash_password(password, self._dummy_salt)
        if credential is None or not verify_password(password, credential.salt, credential.password_hash):
            if self.rate_limiter:
                self.rate_limiter.record_attempt(email)
            logger.info("Login failed")
            raise InvalidCredentialsError()

        session_id = str(uuid.uuid4())
        self.store.create_session(session_id, credential.id, self._clock())

        if self.rate_limiter:
            self.rate_limiter.reset(email)
        logger.info("Login succeeded: user id=%s", credential.id)
        return session_id

    def validate_session(self, session_id: Optional[str]) -> UserIdentity:
        """
        Resolves a session token to the owning user's public identity.

        Raises:
            UnauthenticatedError: Token missing
            InvalidSessionError: Token malformed, unknown, orphaned or expired
            StoreError: Persistence failure
        """
        if session_id is None or not session_id.strip():
            raise UnauthenticatedError()
        session_id = session_id.strip().lower()

        if not is_session_id_format(session_id):
            raise InvalidSessionError()

        resolved = self.store.find_session(session_id)
        if resolved is None:
            raise InvalidSessionError()

        if self._is_expired(resolved.session.date_created):
            self.store.delete_session(session_id)
            logger.info("Session expired: user id=%s", resolved.user.id)
            raise InvalidSessionError()

        return resolved.user

    def revoke_session(self, session_id: str) -> bool:
        """
        Deletes a session (logout).

        Returns:
            True if a session was removed
        """
        if not session_id:
            return False
        session_id = session_id.strip().lower()
        if not is_session_id_format(session_id):
            return False
        removed = self.store.delete_session(session_id)
        if removed:
            logger.info("Session revoked")
        return removed

    def purge_expired_sessions(self) -> int:
        """
        Deletes all sessions older than the TTL.

        Returns:
            Number of removed sessions (0 when expiry is disabled)
        """
        if self.session_ttl is None:
            return 0
        removed = self.store.delete_sessions_created_before(self._clock() - self.session_ttl)
        logger.info("Purged %s expired sessions", removed)
        return removed

    def _is_expired(self, created_at: datetime) -> bool:
        if self.session_ttl is None:
            return False
        return self._clock() - created_at > self.session_ttl
