#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Credential hashing and session management module.
#
"""
Credential hashing and session management module.
"""

from .service import AuthService
from .rate_limiter import LoginRateLimiter
from .factory import build_auth_service
from .utils import normalize_email

__all__ = [
    'AuthService',
    'LoginRateLimiter',
    'build_auth_service',
    'normalize_email'
]
