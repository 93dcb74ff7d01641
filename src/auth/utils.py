#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Input helpers for authentication.
#
"""
Input helpers for authentication.
"""

import uuid
from typing import Optional

from auth.errors import ValidationError


def normalize_email(email: Optional[str]) -> str:
    """
    Normalizes an email address for use as identity key.

    Beispiele:
        >>> normalize_email("  John@X.com ")
        'john@x.com'
    """
    return (email or "").strip().lower()


def require_fields(**fields: Optional[str]) -> None:
    """
    Ensures every given field is present and not blank.

    Raises:
        ValidationError: Lists the missing field names
    """
    missing = [name for name, value in fields.items() if value is None or not str(value).strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def is_session_id_format(session_id: str) -> bool:
    """Checks that the token is a canonical UUID string (as issued at login)."""
    try:
        return str(uuid.UUID(session_id)) == session_id.lower()
    except (ValueError, AttributeError, TypeError):
        return False
