#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: SQL access to tbl_user.
#
from typing import Optional

from mysql.connector.errors import IntegrityError

from auth.errors import DuplicateIdentityError
from domain.user import Credential
from repositories.base import BaseRepository
from repositories.error_handling import handle_repository_errors, is_duplicate_key_error


class UserRepository(BaseRepository):
   @handle_repository_errors("fetch user by email")
   def get_by_email(self, email: str) -> Optional[Credential]:
      """
      Get a credential by its normalized email.

      Returns:
         Credential if found, None otherwise
      """
      sql = "SELECT id, name, email, passwordHash, salt, dateCreated FROM tbl_user WHERE email = %s"
      row = self._fetchone(sql, (email,))
      if not row:
         return None
      return Credential(
         id=row[0],
         name=row[1],
         email=row[2],
         password_hash=row[3],
         salt=row[4],
         date_created=row[5],
      )

   @handle_repository_errors("insert user")
   def insert_user(self, name: str, email: str, password_hash: str, salt: str) -> int:
      """
      Insert a credential into tbl_user.

      Returns:
         Auto-increment ID of the new row

      Raises:
         DuplicateIdentityError: Unique key uq_user_email violated
      """
      sql = "INSERT INTO tbl_user (name, email, passwordHash, salt, dateCreated) VALUES (%s, %s, %s, %s, NOW())"
      try:
         self.cursor.execute(sql, (name, email, password_hash, salt))
      except IntegrityError as exc:
         if is_duplicate_key_error(exc):
            raise DuplicateIdentityError() from exc
         raise
      return self.cursor.lastrowid
