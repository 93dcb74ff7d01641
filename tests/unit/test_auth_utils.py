#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Unit tests for authentication input helpers
#
import uuid

import pytest

from auth.errors import ValidationError
from auth.utils import is_session_id_format, normalize_email, require_fields

pytestmark = pytest.mark.unit


class TestNormalizeEmail:

    def test_strip_and_lowercase(self):
        assert normalize_email("  John@X.com ") == "john@x.com"

    def test_none_becomes_empty(self):
        assert normalize_email(None) == ""


class TestRequireFields:

    def test_all_present(self):
        require_fields(name="John", email="john@x.com", password="secret123")

    def test_missing_fields_are_listed(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields(name="John", email=None, password="   ")
        assert exc_info.value.message == "Missing required fields: email, password"
        assert exc_info.value.status_code == 400


class TestSessionIdFormat:

    def test_issued_format(self):
        assert is_session_id_format(str(uuid.uuid4()))

    @pytest.mark.parametrize("token", ["not-a-real-id", "", "1234", None, "{%s}" % uuid.uuid4()])
    def test_rejects_other_formats(self, token):
        assert not is_session_id_format(token)
