#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Session-protected landing endpoint.
#
from fastapi import APIRouter, Depends

from api.auth_middleware import authenticate_request, ensure_authenticated
from api.models import MessageResponse
from domain.user import UserIdentity

router = APIRouter(tags=["home"], dependencies=[Depends(authenticate_request)])


@router.get("/", response_model=MessageResponse)
def hello(user: UserIdentity = Depends(ensure_authenticated)):
    return MessageResponse(message="Hello, World!")
