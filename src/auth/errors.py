#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Error taxonomy for registration, login and session validation.
#
"""
Error taxonomy for the authentication core.

Every error carries the HTTP status the API layer answers with.
Messages are safe to return to callers as-is.
"""


class AuthError(Exception):
    """Base class for all domain errors of the authentication core."""
    status_code = 400
    default_message = "Authentication error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    """Required field missing or blank."""
    status_code = 400
    default_message = "Invalid request"


class DuplicateIdentityError(AuthError):
    """Email is already registered."""
    status_code = 400
    default_message = "User with this email already exists"


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password. Both cases share one message."""
    status_code = 400
    default_message = "User does not exist with the provided email or password"


class UnauthenticatedError(AuthError):
    """No usable session token on the request."""
    status_code = 401
    default_message = "No session ID provided"


class InvalidSessionError(UnauthenticatedError):
    """Session token does not resolve to an active session."""
    default_message = "Invalid session ID"


class TooManyAttemptsError(AuthError):
    """Login rate limit exhausted for this email."""
    status_code = 429
    default_message = "Too many login attempts"

    def __init__(self, retry_after: int, message: str = None):
        self.retry_after = retry_after
        super().__init__(message or f"Too many login attempts. Please wait {retry_after} seconds.")


class StoreError(Exception):
    """Persistence failure. Detail is logged, never returned to callers."""
    status_code = 500
