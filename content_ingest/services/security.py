"""
Password hashing helpers.

bcrypt only reads the first 72 bytes of a password; longer passwords are
truncated to that many UTF-8 bytes before hashing and before checking.
"""

import bcrypt

BCRYPT_MAX_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return (plain_password or "").encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    password = _password_bytes(plain_password)
    if not password:
        raise ValueError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = _password_bytes(plain_password)
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False
