"""
orders_api.auth.passwords

Password hashing for account credentials.

Responsibilities:
- Hash passwords at registration (pbkdf2_sha256 via passlib).
- Check a login attempt and report when the stored hash should be upgraded.
"""

from __future__ import annotations

from passlib.context import CryptContext

# New schemes go first; older entries stay verifiable and are re-hashed on login.
_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password must not be blank")
    return _context.hash(password)


def check_password(password: str, stored_hash: str) -> tuple[bool, str | None]:
    """
    Verify `password` against `stored_hash`.

    Returns `(matches, replacement_hash)`; the replacement is set only when the
    password matched and the stored hash uses outdated parameters.
    """

    if not password or not stored_hash:
        return False, None
    try:
        return _context.verify_and_update(password, stored_hash)
    except ValueError:
        # Hash format passlib cannot identify.
        return False, None


# --- Module Notes -----------------------------------------------------------
# Only the account service imports this module; the auth gate never sees passwords.
