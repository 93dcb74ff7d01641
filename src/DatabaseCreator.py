#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Creates the SessionAuth schema from an SQL file.
#
import logging
from pathlib import Path

from mysql.connector import Error

from Database import Database


logger = logging.getLogger(__name__)


def split_sql_statements(sql_content: str) -> list[str]:
   """
   Split an SQL script into statements.

   Comment lines (--) are dropped; a statement ends at a line ending with ';'.
   """
   statements = []
   current_statement = []

   for line in sql_content.split('\n'):
      stripped = line.strip()
      if not stripped or stripped.startswith('--'):
         continue

      current_statement.append(line)

      if stripped.endswith(';'):
         statements.append('\n'.join(current_statement))
         current_statement = []

   if current_statement:
      statements.append('\n'.join(current_statement))
   return statements


class DatabaseCreator:
   """Create the database and its tables using a provided Database instance."""

   def __init__(self, db: Database):
      self.db = db

   def create_database(self) -> bool:
      """Create the database if it doesn't exist."""
      try:
         cursor = self.db.connection.cursor()
         cursor.execute(
            f"CREATE DATABASE IF NOT EXISTS `{self.db.database_name}` "
            f"DEFAULT CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
         )
         cursor.close()
         logger.info("Database '%s' created or already exists", self.db.database_name)
         return True
      except Error as e:
         logger.error("Error creating database: %s", e)
         return False

   def execute_sql_file(self, sql_file_path: str) -> bool:
      """
      Execute SQL statements from file.

      Args:
         sql_file_path: Path to the schema file.

      Returns:
         True if all statements executed successfully, False otherwise.
      """
      try:
         sql_content = Path(sql_file_path).read_text(encoding='utf-8')
      except FileNotFoundError:
         logger.error("SQL file not found: %s", sql_file_path)
         return False

      statements = split_sql_statements(sql_content)
      logger.info("Executing %s SQL statements...", len(statements))

      i = 0
      cursor = self.db.connection.cursor()
      try:
         for i, statement in enumerate(statements, 1):
            cursor.execute(statement)
            logger.debug("Statement %s/%s executed", i, len(statements))
         self.db.connection.commit()
      except Error as e:
         logger.error("Error executing statement %s: %s", i, e)
         return False
      finally:
         cursor.close()

      logger.info("Successfully executed %s SQL statements", len(statements))
      return True

   def create_from_file(self, sql_file_path: str) -> bool:
      """
      Complete workflow: connect, create database, execute SQL file.

      Raises:
         RuntimeError: Server unreachable or database could not be created
      """
      if not self.db.connect(use_database=False):
         raise RuntimeError("Failed to connect to MySQL server")

      try:
         if not self.create_database():
            raise RuntimeError("Failed to create database")

         if not self.db.connect(use_database=True):
            raise RuntimeError("Failed to connect to MySQL database")

         success = self.execute_sql_file(sql_file_path)
      finally:
         self.db.close()

      if success:
         logger.info("Database '%s' ready", self.db.database_name)
      else:
         logger.error("Database setup failed")
      return success
