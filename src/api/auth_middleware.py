#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Session authentication dependencies.
#
"""
Session authentication dependencies.

The session token travels in a request header (default "session-id").
"""

import logging
from typing import Optional

from fastapi import Depends, Request

from api.auth_context import AuthContext, get_auth_context
from api.error_handling import handle_auth_errors
from auth.errors import UnauthenticatedError
from domain.user import UserIdentity

logger = logging.getLogger("uvicorn.error")


def get_session_token(request: Request, context: AuthContext = Depends(get_auth_context)) -> Optional[str]:
    """Dependency: raw session token from the configured header, or None."""
    return request.headers.get(context.session_header)


@handle_auth_errors("session validation")
def authenticate_request(
    request: Request,
    session_id: Optional[str] = Depends(get_session_token),
    context: AuthContext = Depends(get_auth_context),
) -> UserIdentity:
    """
    Dependency: resolves the session token and attaches the identity to request.state.user.

    Raises:
        UnauthenticatedError: Header missing
        InvalidSessionError: Token does not resolve to an active session
    """
    try:
        user = context.auth_service.validate_session(session_id)
    except UnauthenticatedError as exc:
        logger.info("AUTH 401 on %s: %s", request.url.path, exc.message)
        raise
    request.state.user = user
    return user


def ensure_authenticated(request: Request) -> UserIdentity:
    """
    Dependency: guard for routes that need an attached identity.

    Raises:
        UnauthenticatedError: No identity attached to the request
    """
    user: Optional[UserIdentity] = getattr(request.state, "user", None)
    if user is None:
        raise UnauthenticatedError("You must be authenticated")
    return user
