#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Pydantic models for API request/response validation.
#
"""
Pydantic models for API request/response validation
"""

from pydantic import BaseModel, Field
from typing import Optional


class SignupRequest(BaseModel):
    """Signup request. Presence and blankness are checked by AuthService."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class SignupResponse(BaseModel):
    user_id: int = Field(alias="userId")
    message: str = "User created successfully"

    class Config:
        populate_by_name = True


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    session_id: str = Field(alias="sessionId")
    message: str = "Login successfully"

    class Config:
        populate_by_name = True


class UserResponse(BaseModel):
    """Public identity of the session owner (never hash or salt)"""
    id: int
    name: str
    email: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
