#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Salted HMAC-SHA256 password hashing.
#
"""
Salted HMAC-SHA256 password hashing.

The salt is the HMAC key and the password is the message. Digests and salts
are stored as hex strings.
"""

import hashlib
import hmac
import secrets

MIN_SALT_BYTES = 32
DEFAULT_SALT_BYTES = 256


def generate_salt(num_bytes: int = DEFAULT_SALT_BYTES) -> str:
    """
    Draws a fresh random salt from the OS CSPRNG.

    Args:
        num_bytes: Number of random bytes (hex output is twice as long)

    Returns:
        Hex-encoded salt

    Raises:
        ValueError: If fewer than MIN_SALT_BYTES are requested
    """
    if num_bytes < MIN_SALT_BYTES:
        raise ValueError(f"Salt must have at least {MIN_SALT_BYTES} bytes")
    return secrets.token_hex(num_bytes)


def hash_password(password: str, salt: str) -> str:
    """Returns the hex HMAC-SHA256 digest of password keyed with salt."""
    return hmac.new(salt.encode("utf-8"), password.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_password(password: str, salt: str, password_hash: str) -> bool:
    """Recomputes the hash and compares it in constant time."""
    if not password or not salt or not password_hash:
        return False
    candidate = hash_password(password, salt)
    return hmac.compare_digest(candidate, password_hash)
