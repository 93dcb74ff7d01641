#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Builds the authentication stack from configuration.
#
"""
Builds the authentication stack from configuration.
"""

import logging
from typing import Any, Optional

from auth.passwords import DEFAULT_SALT_BYTES
from auth.rate_limiter import LoginRateLimiter
from auth.service import AuthService
from repositories.interfaces import AuthStore

logger = logging.getLogger(__name__)


def build_store(config: dict[str, Any]) -> AuthStore:
    """
    Creates the store named by auth.store ('mysql' or 'memory').

    Raises:
        ValueError: Unknown store type
    """
    store_type = (config.get('auth') or {}).get('store', 'mysql')

    if store_type == 'memory':
        from repositories.memory_store import InMemoryAuthStore
        logger.warning("Using in-memory store: credentials and sessions are lost on restart")
        return InMemoryAuthStore()

    if store_type == 'mysql':
        from Database import Database
        from infrastructure.mysql_store import MySQLAuthStore
        db_config = config.get('database') or {}
        db = Database(
            host=db_config.get('host', 'localhost'),
            user=db_config.get('user', ''),
            password=db_config.get('password', ''),
            database_name=db_config.get('name', 'sessionauth'),
            port=int(db_config.get('port', 3306)),
            connect_timeout=int(db_config.get('connect_timeout', 5)),
        )
        logger.info("Using MySQL store at %s:%s/%s", db.host, db.port, db.database_name)
        return MySQLAuthStore(db)

    raise ValueError(f"Unknown store type: {store_type}")


def build_auth_service(config: dict[str, Any], store: Optional[AuthStore] = None) -> AuthService:
    """
    Wires store, rate limiter and service from the config dict.

    Args:
        config: Full configuration (sections 'auth' and 'database')
        store: Optional store overriding auth.store
    """
    auth_config = config.get('auth') or {}

    rate_limiter = None
    rate_config = auth_config.get('rate_limit') or {}
    if rate_config.get('enabled', False):
        rate_limiter = LoginRateLimiter(
            max_attempts=int(rate_config.get('max_attempts', 5)),
            window_minutes=int(rate_config.get('window_minutes', 15)),
        )

    return AuthService(
        store=store if store is not None else build_store(config),
        salt_bytes=int(auth_config.get('salt_bytes', DEFAULT_SALT_BYTES)),
        session_ttl_seconds=int(auth_config.get('session_ttl_seconds', 0)),
        rate_limiter=rate_limiter,
    )
