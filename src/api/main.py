#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: FastAPI application for SessionAuth.
#
"""
FastAPI Main Application for SessionAuth
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.auth_context import set_auth_context
from api.error_handling import register_error_handlers, register_request_logging
from api.routers import home, users
from auth.factory import build_auth_service
from auth.service import AuthService
from config import get_config

logger = logging.getLogger("uvicorn.error")

SERVICE_NAME = "SessionAuth API"
VERSION = "1.0.0"


def create_app(config: Optional[dict] = None, auth_service: Optional[AuthService] = None) -> FastAPI:
    """
    Builds the FastAPI app.

    Args:
        config: Full configuration; loaded from cfg/config.yaml if omitted
        auth_service: Prebuilt service (tests); built from config if omitted
    """
    if config is None:
        config = get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        service = auth_service or build_auth_service(config)
        set_auth_context(app, service, config)
        logger.info("Auth service initialized")
        yield
        logger.info("Shutting down %s", SERVICE_NAME)

    app = FastAPI(
        title=SERVICE_NAME,
        description="Credential and session management API",
        version=VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    cors_origins = (config.get('api') or {}).get('cors_origins', [])
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)
    register_request_logging(app)

    app.include_router(users.router, prefix="/api")
    app.include_router(home.router, prefix="/api")

    @app.get("/api/health")
    def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": VERSION
        }

    return app
