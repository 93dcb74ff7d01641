#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: MySQL connection parameters and connection factory.
#
import logging

import mysql.connector
from mysql.connector import Error


logger = logging.getLogger(__name__)


class Database:
   """MySQL connection settings plus a persistent admin connection for setup tasks."""

   def __init__(self, host: str, user: str, password: str, database_name: str, port: int = 3306,
                connect_timeout: int = 5):
      """
      Initialize database connection parameters.

      Args:
         host: MySQL server host address
         user: Database user
         password: Database password
         database_name: Name of the database
         port: MySQL server port (default: 3306)
         connect_timeout: Seconds to wait for a connection
      """
      self.host = host
      self.user = user
      self.password = password
      self.database_name = database_name
      self.port = port
      self.connect_timeout = connect_timeout
      self.connection = None

   def _connect_args(self, use_database: bool = True) -> dict:
      args = {
         "host": self.host,
         "user": self.user,
         "password": self.password,
         "port": self.port,
         "connect_timeout": self.connect_timeout,
      }
      if use_database:
         args["database"] = self.database_name
      return args

   def connect(self, use_database: bool = True) -> bool:
      """
      Establish persistent connection to MySQL server.

      Args:
         use_database: If True, connect to specific database; if False, connect to server only.

      Returns:
         True on successful connection, False otherwise.
      """
      self.close()
      try:
         self.connection = mysql.connector.connect(autocommit=True, **self._connect_args(use_database))
         if self.connection.is_connected():
            logger.info("Connected to MySQL server version %s", self.connection.get_server_info())
            return True
      except Error as e:
         logger.error("Error connecting to MySQL: %s", e)
         return False
      return False

   def create_connection(self):
      """
      Open a short-lived connection with explicit transaction control.

      The caller owns the connection and must close it.

      Raises:
         mysql.connector.Error: If the server is unreachable or rejects the login
      """
      return mysql.connector.connect(autocommit=False, **self._connect_args())

   def close(self) -> None:
      """Close the persistent connection safely."""
      try:
         if self.connection and self.connection.is_connected():
            self.connection.close()
            logger.info("Database connection closed")
      except Error as e:
         logger.warning("Error closing connection: %s", e)
      finally:
         self.connection = None
