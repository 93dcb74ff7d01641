#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: User API router - signup, login and session management.
#
"""
User API Router - Signup, Login und Session-Management.
"""

from fastapi import APIRouter, Depends, Request, status

from api.auth_context import AuthContext, get_auth_context
from api.auth_middleware import authenticate_request, ensure_authenticated, get_session_token
from api.error_handling import handle_auth_errors
from api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
    SignupResponse,
    UserResponse,
)
from domain.user import UserIdentity


router = APIRouter(prefix="/user", tags=["users"])

_error_responses = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
_auth_error_responses = {
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED,
             responses=_error_responses)
@handle_auth_errors("user signup")
def signup(body: SignupRequest, context: AuthContext = Depends(get_auth_context)):
    """
    Registers a new user.

    The password is hashed with a fresh salt and never stored or returned.
    """
    user_id = context.auth_service.register(body.name, body.email, body.password)
    return SignupResponse(user_id=user_id)


@router.post("/login", response_model=LoginResponse,
             responses={**_error_responses, 429: {"model": ErrorResponse}})
@handle_auth_errors("user login")
def login(body: LoginRequest, context: AuthContext = Depends(get_auth_context)):
    """
    Verifies email and password and opens a new session.

    Each successful login yields an independent session ID.
    """
    session_id = context.auth_service.authenticate(body.email, body.password)
    return LoginResponse(session_id=session_id)


@router.post("/logout", response_model=MessageResponse, responses=_auth_error_responses,
             dependencies=[Depends(authenticate_request)])
@handle_auth_errors("user logout")
def logout(
    session_id: str = Depends(get_session_token),
    context: AuthContext = Depends(get_auth_context),
):
    """Revokes the session sent with this request."""
    context.auth_service.revoke_session(session_id)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse, responses=_auth_error_responses,
            dependencies=[Depends(authenticate_request)])
def get_me(user: UserIdentity = Depends(ensure_authenticated)):
    """Returns the public identity bound to the session."""
    return UserResponse(**user.to_dict())
