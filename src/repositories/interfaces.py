#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Store abstraction used by the authentication service.
#
"""Store abstraction used by the authentication service."""

from datetime import datetime
from typing import Optional, Protocol

from domain.session import ResolvedSession
from domain.user import Credential


class AuthStore(Protocol):
    """
    Persistence port for credentials and sessions.

    Implementations must enforce email uniqueness themselves and raise
    DuplicateIdentityError on a violation, and wrap persistence failures
    in StoreError.
    """

    def find_credential_by_email(self, email: str) -> Optional[Credential]:
        ...

    def create_credential(self, name: str, email: str, password_hash: str, salt: str) -> int:
        """Inserts a credential and returns its id."""
        ...

    def create_session(self, session_id: str, user_id: int, created_at: datetime) -> None:
        ...

    def find_session(self, session_id: str) -> Optional[ResolvedSession]:
        """Returns the session joined with its credential, or None."""
        ...

    def delete_session(self, session_id: str) -> bool:
        ...

    def delete_sessions_created_before(self, cutoff: datetime) -> int:
        ...
