#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: SQL access to tbl_session.
#
from datetime import datetime
from typing import Optional

from domain.session import ResolvedSession, Session
from domain.user import UserIdentity
from repositories.base import BaseRepository
from repositories.error_handling import handle_repository_errors


class SessionRepository(BaseRepository):
   @handle_repository_errors("insert session")
   def insert_session(self, session_id: str, user_id: int, created_at: datetime) -> None:
      sql = "INSERT INTO tbl_session (id, `user`, dateCreated) VALUES (%s, %s, %s)"
      self.cursor.execute(sql, (session_id, user_id, created_at))

   @handle_repository_errors("fetch session")
   def get_with_user(self, session_id: str) -> Optional[ResolvedSession]:
      """
      Get a session joined with its owning user.

      The inner join drops sessions whose user no longer exists.

      Returns:
         ResolvedSession if found, None otherwise
      """
      sql = (
         "SELECT s.id, s.`user`, s.dateCreated, u.name, u.email "
         "FROM tbl_session s INNER JOIN tbl_user u ON u.id = s.`user` "
         "WHERE s.id = %s"
      )
      row = self._fetchone(sql, (session_id,))
      if not row:
         return None
      return ResolvedSession(
         session=Session(id=row[0], user_id=row[1], date_created=row[2]),
         user=UserIdentity(id=row[1], name=row[3], email=row[4]),
      )

   @handle_repository_errors("delete session")
   def delete_session(self, session_id: str) -> bool:
      self.cursor.execute("DELETE FROM tbl_session WHERE id = %s", (session_id,))
      return self.cursor.rowcount > 0

   @handle_repository_errors("delete expired sessions")
   def delete_created_before(self, cutoff: datetime) -> int:
      self.cursor.execute("DELETE FROM tbl_session WHERE dateCreated < %s", (cutoff,))
      return self.cursor.rowcount
