#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Relational AuthStore backed by MySQL.
#
"""
Relational AuthStore backed by MySQL.

Every call opens its own connection and runs inside one UnitOfWork, so a
store call is a single atomic statement from the caller's point of view.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

from mysql.connector import Error

from auth.errors import StoreError
from Database import Database
from domain.session import ResolvedSession
from domain.user import Credential
from infrastructure.unit_of_work import UnitOfWork
from repositories.session_repository import SessionRepository
from repositories.user_repository import UserRepository

logger = logging.getLogger("uvicorn.error")


class MySQLAuthStore:

    def __init__(self, db: Database):
        self.db = db

    @contextmanager
    def _unit_of_work(self) -> Iterator[UnitOfWork]:
        try:
            connection = self.db.create_connection()
        except Error as exc:
            logger.exception("Database connection error (open connection): %s", exc)
            raise StoreError(f"Database connection error: {exc}") from exc

        try:
            with UnitOfWork(connection) as uow:
                yield uow
        except Error as exc:
            # commit/rollback failures; statement errors are already StoreError
            logger.exception("Database error (commit): %s", exc)
            raise StoreError(f"Database error: {exc}") from exc
        finally:
            try:
                connection.close()
            except Error as exc:
                logger.warning("Error closing connection: %s", exc)

    def find_credential_by_email(self, email: str) -> Optional[Credential]:
        with self._unit_of_work() as uow:
            return UserRepository(uow).get_by_email(email)

    def create_credential(self, name: str, email: str, password_hash: str, salt: str) -> int:
        with self._unit_of_work() as uow:
            return UserRepository(uow).insert_user(name, email, password_hash, salt)

    def create_session(self, session_id: str, user_id: int, created_at: datetime) -> None:
        with self._unit_of_work() as uow:
            SessionRepository(uow).insert_session(session_id, user_id, created_at)

    def find_session(self, session_id: str) -> Optional[ResolvedSession]:
        with self._unit_of_work() as uow:
            return SessionRepository(uow).get_with_user(session_id)

    def delete_session(self, session_id: str) -> bool:
        with self._unit_of_work() as uow:
            return SessionRepository(uow).delete_session(session_id)

    def delete_sessions_created_before(self, cutoff: datetime) -> int:
        with self._unit_of_work() as uow:
            return SessionRepository(uow).delete_created_before(cutoff)
