#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Central error handling for the repository layer.
#
"""
Central error handling for the repository layer.

MySQL errors are logged with full detail here and re-raised as StoreError,
so nothing above the repositories depends on mysql.connector.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, Any
import logging

from mysql.connector import errorcode
from mysql.connector.errors import Error as MySQLError, IntegrityError, OperationalError, InterfaceError, DatabaseError

from auth.errors import StoreError

logger = logging.getLogger("uvicorn.error")


def _build_repository_error_detail(
    operation_name: str,
    base_message: str,
    exc: Exception,
    additional_info: str = "",
) -> str:
    detail = f"{base_message} ({operation_name}): {exc}"
    if additional_info:
        detail = f"{detail} | {additional_info}"
    return detail


def is_duplicate_key_error(exc: Exception) -> bool:
    return isinstance(exc, IntegrityError) and getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


def handle_repository_errors(
    operation_name: str = "database operation",
    additional_info: str = "",
):
    """Decorator for consistent error handling in repositories."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except (OperationalError, InterfaceError, DatabaseError) as exc:
                detail = _build_repository_error_detail(
                    operation_name, "Database connection error", exc, additional_info
                )
                logger.exception(detail)
                raise StoreError(detail) from exc
            except MySQLError as exc:
                detail = _build_repository_error_detail(
                    operation_name, "Database error", exc, additional_info
                )
                logger.exception(detail)
                raise StoreError(detail) from exc
        return wrapper
    return decorator
