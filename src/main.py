#!/usr/bin/env python3
#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Command line entry point for SessionAuth.
#
"""
Command line entry point for SessionAuth.
Creates the database schema, purges expired sessions or launches the API server.
"""

import argparse
import logging
import sys
from pathlib import Path

from auth.errors import StoreError
from utils import load_config


logger = logging.getLogger("sessionauth")


def build_parser() -> argparse.ArgumentParser:
   parser = argparse.ArgumentParser(
      description='SessionAuth - credential and session management (uses config.yaml for defaults)',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
   Examples:
     python src/main.py --user root --password secret --setup
     python src/main.py --purge-sessions
     python src/main.py --api --host 0.0.0.0 --port 8000

   Note: Most parameters are read from config.yaml by default.
      Use command-line arguments to override config values.
      """
   )
   parser.add_argument('--config',
                       default='cfg/config.yaml',
                       help='Path to config file (default: cfg/config.yaml)')
   parser.add_argument('--user',
                       help='MySQL user (overrides database.user)')
   parser.add_argument('--password',
                       help='MySQL password (overrides database.password)')
   parser.add_argument('--setup',
                       action='store_true',
                       help='Create the database and tables from database.sql_file')
   parser.add_argument('--purge-sessions',
                       action='store_true',
                       help='Delete sessions older than auth.session_ttl_seconds')
   parser.add_argument('--api',
                       action='store_true',
                       help='Launch the web API server (FastAPI)')
   parser.add_argument('--host',
                       help='API server host (default: api.host or 127.0.0.1)')
   parser.add_argument('--port',
                       type=int,
                       help='API server port (default: api.port or 8000)')
   return parser


def setup_database(config: dict) -> bool:
   from Database import Database
   from DatabaseCreator import DatabaseCreator

   db_config = config['database']
   sql_file = Path(db_config.get('sql_file', './db/schema.sql'))
   if not sql_file.exists():
      raise FileNotFoundError(f"SQL file not found at: {sql_file}")
   logger.info("Using SQL file: %s", sql_file)

   db = Database(
      host=db_config.get('host', 'localhost'),
      user=db_config.get('user', ''),
      password=db_config.get('password', ''),
      database_name=db_config.get('name', 'sessionauth'),
      port=int(db_config.get('port', 3306)),
      connect_timeout=int(db_config.get('connect_timeout', 5))
   )
   return DatabaseCreator(db).create_from_file(str(sql_file))


def purge_sessions(config: dict) -> int:
   from auth.factory import build_auth_service

   service = build_auth_service(config)
   removed = service.purge_expired_sessions()
   logger.info("Removed %s expired sessions", removed)
   return removed


def run_api(config: dict, host: str, port: int) -> None:
   import uvicorn
   from api.main import create_app

   logger.info("Starting SessionAuth API server on http://%s:%s", host, port)
   logger.info("API Documentation: http://%s:%s/api/docs", host, port)

   app = create_app(config=config)
   uvicorn.run(app, host=host, port=port, log_level="info")


def main(argv=None) -> int:
   args = build_parser().parse_args(argv)

   config = load_config(args.config)
   logging.basicConfig(
      level=(config.get('logging') or {}).get('level', 'INFO'),
      format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
   )

   # Command line credentials take precedence over config and environment
   if args.user:
      config['database']['user'] = args.user
   if args.password:
      config['database']['password'] = args.password

   success = True
   if args.setup:
      try:
         success = setup_database(config)
      except (RuntimeError, FileNotFoundError) as e:
         logger.error("Setup failed: %s", e)
         success = False
   else:
      logger.info("No '--setup' argument provided, skipping database creation.")

   if success and args.purge_sessions:
      try:
         purge_sessions(config)
      except StoreError as e:
         logger.error("Purge failed: %s", e)
         success = False

   if success and args.api:
      api_config = config.get('api') or {}
      run_api(config, args.host or api_config.get('host', '127.0.0.1'), args.port or int(api_config.get('port', 8000)))

   return 0 if success else 1


if __name__ == "__main__":
   sys.exit(main())
