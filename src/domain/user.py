#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Credential and public identity records.
#
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Credential:
    id: int
    name: str
    email: str
    password_hash: str
    salt: str
    date_created: Optional[datetime] = None

    def identity(self) -> "UserIdentity":
        return UserIdentity(id=self.id, name=self.name, email=self.email)


@dataclass(frozen=True)
class UserIdentity:
    id: int
    name: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email}
