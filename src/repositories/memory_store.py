#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: In-memory AuthStore for tests and local development.
#
"""
In-memory AuthStore.

Keeps credentials and sessions in dictionaries guarded by one lock so that
each operation behaves like an atomic single-row statement.
"""

import threading
from datetime import datetime
from typing import Dict, Optional

from auth.errors import DuplicateIdentityError, StoreError
from domain.session import ResolvedSession, Session
from domain.user import Credential


class InMemoryAuthStore:

    def __init__(self):
        self.credentials: Dict[int, Credential] = {}
        self.sessions: Dict[str, Session] = {}
        self._email_index: Dict[str, int] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_credential_by_email(self, email: str) -> Optional[Credential]:
        with self._lock:
            user_id = self._email_index.get(email)
            return self.credentials.get(user_id) if user_id is not None else None

    def create_credential(self, name: str, email: str, password_hash: str, salt: str) -> int:
        with self._lock:
            # Unique key on email
            if email in self._email_index:
                raise DuplicateIdentityError()
            user_id = self._next_id
            self._next_id += 1
            self.credentials[user_id] = Credential(
                id=user_id,
                name=name,
                email=email,
                password_hash=password_hash,
                salt=salt,
                date_created=datetime.now(),
            )
            self._email_index[email] = user_id
            return user_id

    def create_session(self, session_id: str, user_id: int, created_at: datetime) -> None:
        with self._lock:
            # Foreign key to credential
            if user_id not in self.credentials:
                raise StoreError(f"Foreign key violation: unknown user id {user_id}")
            self.sessions[session_id] = Session(id=session_id, user_id=user_id, date_created=created_at)

    def find_session(self, session_id: str) -> Optional[ResolvedSession]:
        with self._lock:
            session = self.sessions.get(session_id)
            if session is None:
                return None
            credential = self.credentials.get(session.user_id)
            if credential is None:
                return None
            return ResolvedSession(session=session, user=credential.identity())

    def delete_session(self, session_id: str) -> bool:
        with self._lock:
            return self.sessions.pop(session_id, None) is not None

    def delete_sessions_created_before(self, cutoff: datetime) -> int:
        with self._lock:
            expired = [sid for sid, s in self.sessions.items() if s.date_created < cutoff]
            for session_id in expired:
                del self.sessions[session_id]
            return len(expired)

    def get_session_count(self) -> int:
        with self._lock:
            return len(self.sessions)

    def get_credential_count(self) -> int:
        with self._lock:
            return len(self.credentials)
