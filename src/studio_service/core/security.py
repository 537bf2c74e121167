"""
Password Hashing

Salted password hashes for admin accounts.
"""

import secrets

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt"""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a password with a stored hash; malformed hashes never match"""
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def new_session_id() -> str:
    """Opaque, unguessable session identifier"""
    return secrets.token_urlsafe(32)
