#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Session record.
#
from dataclasses import dataclass
from datetime import datetime

from domain.user import UserIdentity


@dataclass(frozen=True)
class Session:
    id: str
    user_id: int
    date_created: datetime


@dataclass(frozen=True)
class ResolvedSession:
    """Session joined with its owning credential's public identity."""
    session: Session
    user: UserIdentity
