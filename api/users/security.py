"""
Password hashing helpers.
"""

from __future__ import annotations

import bcrypt

# bcrypt only looks at the first 72 bytes and refuses longer input.
MAX_PASSWORD_BYTES = 72


class PasswordError(ValueError):
    pass


def check_password_length(plain_password: str) -> str:
    if len(plain_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise PasswordError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")
    return plain_password


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")
