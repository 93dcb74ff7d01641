#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Centralized auth context storage for the app.
#
"""
Centralized auth context storage for the app.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, Request, status

from auth.service import AuthService

DEFAULT_SESSION_HEADER = "session-id"


@dataclass(frozen=True)
class AuthContext:
    auth_service: AuthService
    session_header: str = DEFAULT_SESSION_HEADER


def set_auth_context(
    app,
    auth_service: AuthService,
    config: dict,
) -> None:
    """Attach auth context to the FastAPI app state."""
    auth_config = config.get('auth') or {}
    app.state.auth_context = AuthContext(
        auth_service=auth_service,
        session_header=auth_config.get('session_header', DEFAULT_SESSION_HEADER),
    )


def get_auth_context(request: Request) -> AuthContext:
    """Fetch auth context from the FastAPI app state."""
    context: Optional[AuthContext] = getattr(request.app.state, "auth_context", None)
    if not context:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service not initialized",
        )
    return context
